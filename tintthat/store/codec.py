"""
Collection file codec.

Pydantic documents describe the on-disk JSON. Conversion functions map
between documents and domain models, the way rows map to models in a
database layer.
"""

from uuid import UUID

from pydantic import BaseModel, Field, ValidationError, model_validator

from tintthat.models.collection import Collection
from tintthat.models.color import COMPONENT_MAX, COMPONENT_MIN, Color
from tintthat.models.failure import CollectionDecodeError
from tintthat.models.palette import Palette


class ColorDocument(BaseModel):
    """Stored RGBA components."""

    red: int = Field(..., ge=COMPONENT_MIN, le=COMPONENT_MAX)
    green: int = Field(..., ge=COMPONENT_MIN, le=COMPONENT_MAX)
    blue: int = Field(..., ge=COMPONENT_MIN, le=COMPONENT_MAX)
    alpha: int = Field(default=COMPONENT_MAX, ge=COMPONENT_MIN, le=COMPONENT_MAX)


class PaletteDocument(BaseModel):
    """Stored palette with its ordered colors."""

    id: UUID
    title: str = ""
    colors: list[ColorDocument] = Field(default_factory=list)


class CollectionDocument(BaseModel):
    """Stored collection: the full graph of one file."""

    id: UUID
    title: str
    palettes: list[PaletteDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_palette_ids(self) -> "CollectionDocument":
        ids = [palette.id for palette in self.palettes]
        if len(ids) != len(set(ids)):
            raise ValueError("palette ids must be unique")
        return self


def collection_to_document(collection: Collection) -> CollectionDocument:
    """Convert a domain collection to its stored document."""
    return CollectionDocument(
        id=collection.id,
        title=collection.title,
        palettes=[
            PaletteDocument(
                id=palette.id,
                title=palette.title,
                colors=[
                    ColorDocument(
                        red=color.red,
                        green=color.green,
                        blue=color.blue,
                        alpha=color.alpha,
                    )
                    for color in palette.colors
                ],
            )
            for palette in collection.palettes
        ],
    )


def document_to_collection(document: CollectionDocument) -> Collection:
    """Convert a stored document to a domain collection."""
    return Collection(
        id=document.id,
        title=document.title,
        palettes=[
            Palette(
                id=palette.id,
                title=palette.title,
                colors=[Color(c.red, c.green, c.blue, c.alpha) for c in palette.colors],
            )
            for palette in document.palettes
        ],
    )


def encode_collection(collection: Collection) -> bytes:
    """Serialize a collection to UTF-8 JSON bytes."""
    return collection_to_document(collection).model_dump_json(indent=2).encode("utf-8")


def decode_collection(data: bytes | str) -> Collection:
    """
    Deserialize a collection from JSON.

    Raises:
        CollectionDecodeError: If the data is not JSON or fails validation
    """
    try:
        document = CollectionDocument.model_validate_json(data)
    except ValidationError as e:
        raise CollectionDecodeError(detail=f"{e.error_count()} validation errors") from e
    return document_to_collection(document)
