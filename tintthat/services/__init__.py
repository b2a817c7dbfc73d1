"""
TintThat services.

Editor logic and table rendering over the collection model.
"""

from tintthat.services.editor import (
    ChangeKind,
    Editor,
    EditorUpdate,
    TableChange,
)
from tintthat.services.table_layout import (
    Cell,
    ColorCell,
    EditorState,
    EmptyCell,
    TableSection,
    build_table,
    number_of_rows,
    number_of_sections,
)

__all__ = [
    "Cell",
    "ChangeKind",
    "ColorCell",
    "Editor",
    "EditorState",
    "EditorUpdate",
    "EmptyCell",
    "TableChange",
    "TableSection",
    "build_table",
    "number_of_rows",
    "number_of_sections",
]
