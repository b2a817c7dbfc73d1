"""
Collection library endpoints.

Lists, reads, and deletes stored collections (the "My Palettes" screen).
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from tintthat.models.collection import Collection, CollectionSummary
from tintthat.models.failure import DELETED_MESSAGE, NOT_DELETED_MESSAGE
from tintthat.store import (
    StoreLocation,
    clear_open_collection_id,
    collection_file_exists,
    delete_collection_file,
    get_decoded_collection,
    get_location,
    list_collections,
    read_open_collection_id,
)

router = APIRouter(prefix="/collections", tags=["collections"])


class PaletteResponse(BaseModel):
    """A palette with colors rendered as "#RRGGBBAA"."""

    id: UUID
    title: str
    colors: list[str] = Field(default_factory=list)


class CollectionResponse(BaseModel):
    """Response model for a full collection."""

    id: UUID
    title: str
    palettes: list[PaletteResponse] = Field(default_factory=list)
    is_empty: bool = True
    palette_count: int = 0
    color_count: int = 0


class CollectionSummaryResponse(BaseModel):
    """Listing entry for a stored collection."""

    id: UUID
    title: str
    palette_count: int
    color_count: int


class CollectionListResponse(BaseModel):
    collections: list[CollectionSummaryResponse]
    count: int


class DeleteResponse(BaseModel):
    """Response model for delete operations."""

    collection_id: UUID
    deleted: bool
    message: str = Field(
        default="",
        description="User-facing message about the deletion",
    )


def collection_response(collection: Collection) -> CollectionResponse:
    """Convert a domain collection to its response model."""
    return CollectionResponse(
        id=collection.id,
        title=collection.title,
        palettes=[
            PaletteResponse(
                id=palette.id,
                title=palette.title,
                colors=[color.hex for color in palette.colors],
            )
            for palette in collection.palettes
        ],
        is_empty=collection.is_empty,
        palette_count=collection.count,
        color_count=collection.total_colors(),
    )


def _summary_response(summary: CollectionSummary) -> CollectionSummaryResponse:
    return CollectionSummaryResponse(
        id=summary.id,
        title=summary.title,
        palette_count=summary.palette_count,
        color_count=summary.color_count,
    )


@router.get("", response_model=CollectionListResponse)
async def get_collections(
    location: Annotated[StoreLocation, Depends(get_location)],
) -> CollectionListResponse:
    """
    List stored collections.

    Ordered by title. Unreadable files are left out.
    """
    summaries = list_collections(location)
    return CollectionListResponse(
        collections=[_summary_response(s) for s in summaries],
        count=len(summaries),
    )


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: UUID,
    location: Annotated[StoreLocation, Depends(get_location)],
) -> CollectionResponse:
    """
    Get a stored collection.

    Returns 404 if the file is missing or corrupt.
    """
    collection = get_decoded_collection(location, collection_id)
    if collection is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Collection '{collection_id}' not found",
        )
    return collection_response(collection)


@router.delete("/{collection_id}", response_model=DeleteResponse)
async def delete_collection(
    collection_id: UUID,
    location: Annotated[StoreLocation, Depends(get_location)],
) -> DeleteResponse:
    """
    Delete a stored collection.

    If it is the collection the editor reopens on launch, the pointer is
    cleared too. A failed deletion leaves the pointer untouched.
    """
    deleted = delete_collection_file(location, collection_id)

    if not deleted and collection_file_exists(location, collection_id):
        return DeleteResponse(
            collection_id=collection_id,
            deleted=False,
            message=NOT_DELETED_MESSAGE,
        )

    if not deleted:
        return DeleteResponse(
            collection_id=collection_id,
            deleted=False,
            message="No collection found to delete.",
        )

    if read_open_collection_id(location) == collection_id:
        clear_open_collection_id(location)

    return DeleteResponse(collection_id=collection_id, deleted=True, message=DELETED_MESSAGE)
