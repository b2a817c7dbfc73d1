"""
Editor API endpoints.

Each request rebuilds the editor from the stored pointer, so indices are
always resolved against the current collection.
"""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from tintthat.api.collections import CollectionResponse, collection_response
from tintthat.models.color import Color
from tintthat.models.palette import new_palette
from tintthat.services.editor import ChangeKind, Editor, EditorUpdate
from tintthat.services.table_layout import ColorCell, EditorState, EmptyCell, TableSection
from tintthat.store import StoreLocation, get_location, read_open_collection_id

router = APIRouter(prefix="/editor", tags=["editor"])


# --- Request models ---


class CreateCollectionRequest(BaseModel):
    title: str = Field(..., description="Title of the new collection", examples=["Vacation"])
    seed: bool = Field(
        default=False,
        description="Start with the default 'My Palette' instead of no palettes",
    )


class RenameCollectionRequest(BaseModel):
    title: str = Field(..., description="New collection title")


class AddPaletteRequest(BaseModel):
    title: str | None = Field(default=None, description="Palette title (defaults to 'Added')")
    colors: list[str] | None = Field(
        default=None,
        description="Hex colors, '#RRGGBB' or '#RRGGBBAA'",
        examples=[["#000000", "#00FFFF"]],
    )


class PaletteTitleRequest(BaseModel):
    title: str = Field(..., description="Palette title, may be empty")


class ColorRequest(BaseModel):
    color: str = Field(..., description="Hex color", examples=["#FF8800"])


# --- Response models ---


class CellResponse(BaseModel):
    kind: Literal["empty", "color"]
    text: str | None = None
    section: int | None = None
    row: int | None = None
    color: str | None = None


class SectionResponse(BaseModel):
    header: str | None = None
    cells: list[CellResponse]


class ChangeResponse(BaseModel):
    kind: ChangeKind
    section: int | None = None
    row: int | None = None


class EditorResponse(BaseModel):
    """Editor state after an action."""

    state: EditorState
    collection: CollectionResponse | None = None
    table: list[SectionResponse]
    change: ChangeResponse | None = None
    saved: bool = True
    message: str | None = None


def get_editor(location: Annotated[StoreLocation, Depends(get_location)]) -> Editor:
    """Dependency that opens the editor on the stored pointer."""
    return Editor(location, current_id=read_open_collection_id(location))


def _cell_response(cell: EmptyCell | ColorCell) -> CellResponse:
    match cell:
        case EmptyCell(text=text):
            return CellResponse(kind="empty", text=text)
        case ColorCell(section=section, row=row, color=color):
            return CellResponse(kind="color", section=section, row=row, color=color.hex)


def _section_response(section: TableSection) -> SectionResponse:
    return SectionResponse(
        header=section.header,
        cells=[_cell_response(cell) for cell in section.cells],
    )


def _editor_response(editor: Editor, update: EditorUpdate | None = None) -> EditorResponse:
    response = EditorResponse(
        state=editor.state,
        collection=(
            collection_response(editor.collection)
            if editor.state is EditorState.READY
            else None
        ),
        table=[_section_response(section) for section in editor.table()],
    )
    if update is not None:
        response.change = ChangeResponse(
            kind=update.change.kind,
            section=update.change.section,
            row=update.change.row,
        )
        response.saved = update.saved
        response.message = update.message
    return response


def _parse_color(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid color '{value}'. Use '#RRGGBB' or '#RRGGBBAA'.",
        ) from e


# --- Endpoints ---


@router.get("", response_model=EditorResponse)
async def get_editor_state(editor: Annotated[Editor, Depends(get_editor)]) -> EditorResponse:
    """
    Get the editor state.

    Returns the open collection and its table. When no collection is open
    the table holds a single placeholder cell.
    """
    return _editor_response(editor)


@router.post("/collection", response_model=EditorResponse)
async def create_collection(
    request: CreateCollectionRequest,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """Create a collection, save it, and open it."""
    update = editor.create(request.title, seed=request.seed)
    return _editor_response(editor, update)


@router.post("/collection/{collection_id}/open", response_model=EditorResponse)
async def open_collection(
    collection_id: UUID,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """Open a stored collection. Returns 404 if it cannot be read."""
    update = editor.load(collection_id)
    return _editor_response(editor, update)


@router.patch("/collection", response_model=EditorResponse)
async def rename_collection(
    request: RenameCollectionRequest,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """Retitle the open collection and save it."""
    update = editor.rename_collection(request.title)
    return _editor_response(editor, update)


@router.delete("/collection", response_model=EditorResponse)
async def delete_open_collection(
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """
    Delete the open collection.

    This removes its file and the reopen pointer, leaving the editor with
    no collection. If the file cannot be removed nothing changes.
    """
    update = editor.delete_current()
    return _editor_response(editor, update)


@router.post("/palettes", response_model=EditorResponse)
async def add_palette(
    editor: Annotated[Editor, Depends(get_editor)],
    request: AddPaletteRequest | None = None,
) -> EditorResponse:
    """Append a palette to the open collection. Ignored when none is open."""
    if request is None:
        request = AddPaletteRequest()

    colors = None
    if request.colors is not None:
        colors = [_parse_color(value) for value in request.colors]

    update = editor.add_palette(new_palette(title=request.title, colors=colors))
    return _editor_response(editor, update)


@router.delete("/palettes/{section}", response_model=EditorResponse)
async def delete_palette(
    section: int,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """Delete a palette. Later palettes move up one section."""
    update = editor.delete_palette(section)
    return _editor_response(editor, update)


@router.put("/palettes/{section}/title", response_model=EditorResponse)
async def rename_palette(
    section: int,
    request: PaletteTitleRequest,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    update = editor.rename_palette(section, request.title)
    return _editor_response(editor, update)


@router.post("/palettes/{section}/colors", response_model=EditorResponse)
async def add_color(
    section: int,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    """Append the default color to a palette. The new row is in `change.row`."""
    update = editor.add_color(section)
    return _editor_response(editor, update)


@router.put("/palettes/{section}/colors/{row}", response_model=EditorResponse)
async def set_color(
    section: int,
    row: int,
    request: ColorRequest,
    editor: Annotated[Editor, Depends(get_editor)],
) -> EditorResponse:
    color = _parse_color(request.color)
    update = editor.set_color(section, row, color)
    return _editor_response(editor, update)
