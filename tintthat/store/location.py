"""
Storage location management.

Resolves the application-private directory that holds one file per
collection plus the session pointer, and provides it to FastAPI.
"""

from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from tintthat.config import (
    COLLECTION_FILE_SUFFIX,
    COLLECTIONS_DIRNAME,
    SESSION_FILENAME,
    settings,
)


@dataclass(frozen=True, slots=True)
class StoreLocation:
    """Filesystem layout rooted at the application data directory."""

    root: Path

    @property
    def collections_dir(self) -> Path:
        return self.root / COLLECTIONS_DIRNAME

    @property
    def session_file(self) -> Path:
        return self.root / SESSION_FILENAME

    def collection_path(self, identity: UUID) -> Path:
        """File named by the collection's identity."""
        return self.collections_dir / f"{identity}{COLLECTION_FILE_SUFFIX}"


def get_location() -> StoreLocation:
    """
    Dependency that provides the storage location.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(location: StoreLocation = Depends(get_location)):
            ...
    """
    return StoreLocation(root=settings.data_dir)


def init_store(location: StoreLocation | None = None) -> StoreLocation:
    """
    Create the storage directories.

    Should be called once at application startup.
    """
    if location is None:
        location = get_location()
    location.collections_dir.mkdir(parents=True, exist_ok=True)
    return location
