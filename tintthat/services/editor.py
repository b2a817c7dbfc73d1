"""
Collection editor.

Holds the open collection, applies user actions to it, and persists every
change with a full write-through save. Each action returns the table delta
the view must apply and the outcome of the save.

States:
- UNINITIALIZED: No collection created or loaded; an empty placeholder is shown
- READY: A collection is open

The identity of the collection to reopen is passed in at construction.
Creating or loading stores it; deleting the open collection clears it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from tintthat.models.collection import Collection
from tintthat.models.color import Color
from tintthat.models.failure import (
    CREATED_MESSAGE,
    DELETED_MESSAGE,
    NOT_CREATED_MESSAGE,
    NOT_DELETED_MESSAGE,
    NOT_SAVED_MESSAGE,
    SAVED_MESSAGE,
    CollectionNotFoundError,
    CollectionSaveError,
    InvalidTitleError,
    NoOpenCollectionError,
)
from tintthat.models.palette import Palette, new_palette, starter_palette
from tintthat.services.table_layout import EditorState, TableSection, build_table
from tintthat.store.location import StoreLocation
from tintthat.store.operations import (
    clear_open_collection_id,
    collection_file_exists,
    delete_collection_file,
    get_decoded_collection,
    save_collection,
    write_open_collection_id,
)

logger = logging.getLogger(__name__)


class ChangeKind(str, Enum):
    """Structural delta to apply to the table."""

    NONE = "none"
    RELOAD = "reload"
    INSERT_SECTION = "insert_section"
    DELETE_SECTION = "delete_section"
    RELOAD_SECTION = "reload_section"
    INSERT_ROW = "insert_row"
    RELOAD_ROW = "reload_row"


@dataclass(frozen=True, slots=True)
class TableChange:
    kind: ChangeKind
    section: int | None = None
    row: int | None = None


NO_CHANGE = TableChange(ChangeKind.NONE)
RELOAD = TableChange(ChangeKind.RELOAD)


@dataclass(frozen=True, slots=True)
class EditorUpdate:
    """
    Result of an editor action.

    Attributes:
        change: Table delta to apply
        saved: Whether the write-through save succeeded (True if nothing to save)
        message: Short user-facing status, None when there is nothing to report
    """

    change: TableChange
    saved: bool = True
    message: str | None = None


def _validate_title(title: str) -> str:
    title = title.strip()
    if not title:
        raise InvalidTitleError()
    return title


class Editor:
    """Editor for a single open collection."""

    def __init__(self, location: StoreLocation, current_id: UUID | None = None):
        self._location = location
        self._state = EditorState.UNINITIALIZED
        self._collection = Collection()

        if current_id is not None:
            resolved = get_decoded_collection(location, current_id)
            if resolved is None:
                logger.warning("Open collection %s could not be resolved", current_id)
            else:
                self._collection = resolved
                self._state = EditorState.READY

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def current_id(self) -> UUID | None:
        """Identity of the open collection, None while uninitialized."""
        if self._state is EditorState.UNINITIALIZED:
            return None
        return self._collection.id

    def table(self) -> list[TableSection]:
        return build_table(self._collection, self._state)

    # --- Collection lifecycle ---

    def create(self, title: str, seed: bool = False) -> EditorUpdate:
        """
        Open a new collection and save it.

        The collection starts with no palettes unless `seed` asks for the
        starter palette.
        """
        collection = Collection(title=_validate_title(title))
        if seed:
            collection.add_palette(starter_palette())

        self._collection = collection
        self._state = EditorState.READY
        logger.info("Created collection %s", collection.id)

        try:
            save_collection(self._location, collection)
        except CollectionSaveError:
            return EditorUpdate(change=RELOAD, saved=False, message=NOT_CREATED_MESSAGE)

        if not write_open_collection_id(self._location, collection.id):
            return EditorUpdate(change=RELOAD, saved=False, message=NOT_SAVED_MESSAGE)
        return EditorUpdate(change=RELOAD, message=CREATED_MESSAGE)

    def load(self, identity: UUID) -> EditorUpdate:
        """
        Open a stored collection.

        Raises:
            CollectionNotFoundError: If the file is missing or corrupt; state is unchanged
        """
        collection = get_decoded_collection(self._location, identity)
        if collection is None:
            raise CollectionNotFoundError(identity)

        self._collection = collection
        self._state = EditorState.READY
        logger.info("Loaded collection %s", identity)
        if not write_open_collection_id(self._location, identity):
            return EditorUpdate(change=RELOAD, saved=False, message=NOT_SAVED_MESSAGE)
        return EditorUpdate(change=RELOAD)

    def rename_collection(self, title: str) -> EditorUpdate:
        """
        Retitle the open collection ("save as").

        The retitled copy is written first; the in-memory title only changes
        if the write succeeds.
        """
        self._require_ready()
        title = _validate_title(title)

        copy = Collection(title=title, palettes=self._collection.palettes, id=self._collection.id)
        try:
            save_collection(self._location, copy)
        except CollectionSaveError:
            return EditorUpdate(change=NO_CHANGE, saved=False, message=NOT_SAVED_MESSAGE)

        self._collection.title = title
        return EditorUpdate(change=NO_CHANGE, message=SAVED_MESSAGE)

    def delete_current(self) -> EditorUpdate:
        """
        Delete the open collection's file and return to the placeholder.

        A file that is already gone counts as deleted. If the file cannot be
        removed the state and the pointer are kept.
        """
        self._require_ready()
        identity = self._collection.id

        removed = delete_collection_file(self._location, identity)
        if not removed and collection_file_exists(self._location, identity):
            logger.warning("Collection %s was not deleted", identity)
            return EditorUpdate(change=NO_CHANGE, saved=False, message=NOT_DELETED_MESSAGE)

        clear_open_collection_id(self._location)
        self._collection = Collection()
        self._state = EditorState.UNINITIALIZED
        logger.info("Deleted collection %s", identity)
        return EditorUpdate(change=RELOAD, message=DELETED_MESSAGE)

    # --- Palette and color actions ---

    def add_palette(self, palette: Palette | None = None) -> EditorUpdate:
        """Append a palette. Does nothing while uninitialized."""
        if self._state is EditorState.UNINITIALIZED:
            return EditorUpdate(change=NO_CHANGE)

        was_empty = self._collection.is_empty
        self._collection.add_palette(palette if palette is not None else new_palette())

        if was_empty:
            change = RELOAD
        else:
            change = TableChange(ChangeKind.INSERT_SECTION, section=self._collection.count - 1)
        return self._write_through(change)

    def delete_palette(self, section: int) -> EditorUpdate:
        self._collection.delete_palette(section)

        if self._collection.is_empty:
            change = RELOAD
        else:
            change = TableChange(ChangeKind.DELETE_SECTION, section=section)
        return self._write_through(change)

    def rename_palette(self, section: int, title: str) -> EditorUpdate:
        # Palette titles may be empty
        self._collection.set_title_of_palette(section, title)
        return self._write_through(TableChange(ChangeKind.RELOAD_SECTION, section=section))

    def add_color(self, section: int) -> EditorUpdate:
        row = self._collection.add_color_to_palette(section)
        return self._write_through(TableChange(ChangeKind.INSERT_ROW, section=section, row=row))

    def set_color(self, section: int, row: int, color: Color) -> EditorUpdate:
        self._collection.set_color_of_palette(section, row, color)
        return self._write_through(TableChange(ChangeKind.RELOAD_ROW, section=section, row=row))

    # --- Internals ---

    def _require_ready(self) -> None:
        if self._state is EditorState.UNINITIALIZED:
            raise NoOpenCollectionError()

    def _write_through(self, change: TableChange) -> EditorUpdate:
        """Save the whole collection after a mutation. Failure does not roll back."""
        if self._state is EditorState.UNINITIALIZED:
            return EditorUpdate(change=change)

        try:
            save_collection(self._location, self._collection)
        except CollectionSaveError:
            return EditorUpdate(change=change, saved=False, message=NOT_SAVED_MESSAGE)
        return EditorUpdate(change=change)
