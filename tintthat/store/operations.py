"""
Collection file operations.

Provides functions for saving, reading, listing, and deleting collection
files, and for the pointer naming the collection to reopen on next launch.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from uuid import UUID

from tintthat.config import COLLECTION_FILE_SUFFIX
from tintthat.models.collection import Collection, CollectionSummary
from tintthat.models.failure import CollectionDecodeError, CollectionSaveError
from tintthat.store.codec import decode_collection, encode_collection
from tintthat.store.location import StoreLocation

logger = logging.getLogger(__name__)

_POINTER_KEY = "current_collection_id"


def _write_atomic(path: Path, data: bytes) -> None:
    """Write to a sibling temporary file, then replace the target."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise


# --- Collection Operations ---


def save_collection(location: StoreLocation, collection: Collection) -> None:
    """
    Write the full collection to the file named by its identity.

    Overwrites any prior version. In-memory state is never touched.

    Raises:
        CollectionSaveError: If encoding or writing fails
    """
    path = location.collection_path(collection.id)

    try:
        data = encode_collection(collection)
    except ValueError as e:
        logger.warning("Failed to encode collection %s: %s", collection.id, e)
        raise CollectionSaveError(collection.id, detail=f"encode: {e}") from e

    try:
        _write_atomic(path, data)
    except OSError as e:
        logger.warning("Failed to write collection %s to %s: %s", collection.id, path, e)
        raise CollectionSaveError(collection.id, detail=f"write: {e}") from e

    logger.debug("Saved collection %s (%d bytes) to %s", collection.id, len(data), path)


def get_decoded_collection(location: StoreLocation, identity: UUID) -> Collection | None:
    """
    Read the collection named by `identity`.

    Returns None if the file is missing or corrupt.
    """
    path = location.collection_path(identity)

    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("Failed to read collection file %s: %s", path, e)
        return None

    try:
        collection = decode_collection(data)
    except CollectionDecodeError as e:
        logger.warning("Corrupt collection file %s: %s", path, e.detail)
        return None

    if collection.id != identity:
        logger.warning("Collection file %s holds mismatched id %s", path, collection.id)
        return None

    return collection


def collection_file_exists(location: StoreLocation, identity: UUID) -> bool:
    """Whether a file is stored for `identity`, readable or not."""
    return location.collection_path(identity).is_file()


def delete_collection_file(location: StoreLocation, identity: UUID) -> bool:
    """
    Remove the file of a collection.

    Returns True if deleted, False if not found or removal failed.
    """
    path = location.collection_path(identity)

    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning("Failed to delete collection file %s: %s", path, e)
        return False

    return True


def list_collections(location: StoreLocation) -> list[CollectionSummary]:
    """
    Summaries of every readable collection, ordered by title then id.

    Unreadable files are skipped.
    """
    directory = location.collections_dir
    if not directory.is_dir():
        return []

    summaries: list[CollectionSummary] = []
    for path in directory.glob(f"*{COLLECTION_FILE_SUFFIX}"):
        try:
            identity = UUID(path.stem)
        except ValueError:
            logger.debug("Skipping non-collection file %s", path)
            continue

        collection = get_decoded_collection(location, identity)
        if collection is not None:
            summaries.append(collection.summary())

    summaries.sort(key=lambda s: (s.title.casefold(), str(s.id)))
    return summaries


# --- Open Collection Pointer ---


def read_open_collection_id(location: StoreLocation) -> UUID | None:
    """
    Identity of the collection to reopen on launch.

    Returns None if no pointer is stored or it is unreadable.
    """
    path = location.session_file

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.warning("Unreadable session file %s: %s", path, e)
        return None

    if not isinstance(payload, dict) or not payload.get(_POINTER_KEY):
        return None

    try:
        return UUID(str(payload[_POINTER_KEY]))
    except ValueError:
        logger.warning("Session file %s holds an invalid id", path)
        return None


def write_open_collection_id(location: StoreLocation, identity: UUID) -> bool:
    """
    Store the identity of the open collection.

    Returns True if written.
    """
    data = json.dumps({_POINTER_KEY: str(identity)}).encode("utf-8")
    try:
        _write_atomic(location.session_file, data)
    except OSError as e:
        logger.warning("Failed to write session file: %s", e)
        return False
    return True


def clear_open_collection_id(location: StoreLocation) -> bool:
    """
    Remove the stored pointer.

    Returns True if no pointer remains.
    """
    try:
        location.session_file.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Failed to clear session file: %s", e)
        return False
    return True
