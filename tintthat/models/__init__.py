from tintthat.models.collection import Collection, CollectionSummary
from tintthat.models.color import BLACK, BROWN, CYAN, RED, WHITE, Color
from tintthat.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    CollectionDecodeError,
    CollectionNotFoundError,
    CollectionSaveError,
    DuplicatePaletteError,
    FailureDetail,
    FailureKind,
    InvalidTitleError,
    KnownError,
    NoOpenCollectionError,
    OutcomeType,
    PaletteIndexError,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from tintthat.models.palette import DEFAULT_COLOR, Palette, new_palette, starter_palette

__all__ = [
    "ApiResponse",
    "BLACK",
    "BROWN",
    "CYAN",
    "Collection",
    "CollectionDecodeError",
    "CollectionNotFoundError",
    "CollectionSaveError",
    "CollectionSummary",
    "Color",
    "DEFAULT_COLOR",
    "DuplicatePaletteError",
    "FailureDetail",
    "FailureKind",
    "InvalidTitleError",
    "KnownError",
    "NoOpenCollectionError",
    "OutcomeType",
    "Palette",
    "PaletteIndexError",
    "RED",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "WHITE",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
    "new_palette",
    "starter_palette",
]
