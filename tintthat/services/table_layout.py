"""
Headless table layout for the editor.

Maps a collection onto sections (palettes) and rows (colors). Each row is
resolved once into a cell kind; consumers match on the kind instead of
inspecting a generic cell.
"""

from dataclasses import dataclass
from enum import Enum

from tintthat.models.collection import Collection
from tintthat.models.color import Color


class EditorState(str, Enum):
    """Displayed state of the editor."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


EMPTY_TEXT: dict[EditorState, str] = {
    EditorState.UNINITIALIZED: "Create or load a collection to start.",
    EditorState.READY: "This collection has no palettes yet.",
}


@dataclass(frozen=True, slots=True)
class EmptyCell:
    """Placeholder row shown when the collection has no palettes."""

    text: str


@dataclass(frozen=True, slots=True)
class ColorCell:
    """Row showing one color of a palette."""

    section: int
    row: int
    color: Color


Cell = EmptyCell | ColorCell


@dataclass(frozen=True, slots=True)
class TableSection:
    """One section: a palette header and its color rows."""

    header: str | None
    cells: tuple[Cell, ...]


def build_table(collection: Collection, state: EditorState) -> list[TableSection]:
    """
    Render a collection into table sections.

    An empty collection renders a single header-less section holding one
    placeholder cell whose text depends on the editor state.
    """
    if collection.is_empty:
        return [TableSection(header=None, cells=(EmptyCell(text=EMPTY_TEXT[state]),))]

    return [
        TableSection(
            header=palette.title,
            cells=tuple(
                ColorCell(section=section, row=row, color=color)
                for row, color in enumerate(palette.colors)
            ),
        )
        for section, palette in enumerate(collection.palettes)
    ]


def number_of_sections(collection: Collection) -> int:
    """Section count including the placeholder section."""
    if collection.is_empty:
        return 1
    return collection.count


def number_of_rows(collection: Collection, section: int) -> int:
    """Row count of a section including the placeholder row."""
    if collection.is_empty:
        return 1
    return collection.number_of_colors(section)
