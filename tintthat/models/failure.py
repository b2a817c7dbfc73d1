"""
Failure taxonomy and response envelope.

Every user-visible failure is classified here. Storage and editor errors
are raised as `KnownError` subclasses at the point of the file operation or
model call, and the HTTP layer converts them into an `ApiResponse` through
`finalize_response()`.

Response types:
- Success: Operation completed successfully
- KnownFailure: System knows why it failed
- UnknownFailure: System does not know why it failed
"""

from enum import Enum
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"
    INDEX_OUT_OF_RANGE = "index_out_of_range"

    # Storage failures
    NOT_SAVED = "not_saved"
    NOT_DELETED = "not_deleted"
    DECODE_FAILED = "decode_failed"

    # Editor state
    NO_OPEN_COLLECTION = "no_open_collection"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Short user-facing explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for failures and wrapped results.

    Every failure is classified into an outcome type so no error reaches
    the user unexplained.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )


# =============================================================================
# KNOWN ERRORS
# =============================================================================


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized ApiResponse."""
        response: ApiResponse[Any] = ApiResponse(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            ),
        )
        return finalize_response(response)


class PaletteIndexError(KnownError):
    """Raised when a section or row does not address an existing palette or color."""

    def __init__(self, section: int, row: int | None = None, detail: str | None = None):
        self.section = section
        self.row = row
        if row is None:
            message = f"There is no palette at position {section}."
        else:
            message = f"There is no color at position {row} of palette {section}."
        super().__init__(
            kind=FailureKind.INDEX_OUT_OF_RANGE,
            message=message,
            detail=detail,
            suggestion="Refresh the collection and try again.",
            status_code=404,
        )


class DuplicatePaletteError(KnownError):
    """Raised when a palette id already appears in the collection."""

    def __init__(self, palette_id: UUID):
        self.palette_id = palette_id
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message="The palette is already in the collection.",
            detail=str(palette_id),
            status_code=409,
        )


class CollectionNotFoundError(KnownError):
    """Raised when a collection identity does not resolve to a readable file."""

    def __init__(self, identity: UUID):
        self.identity = identity
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="Collection not found.",
            detail=str(identity),
            status_code=404,
        )


class InvalidTitleError(KnownError):
    """Raised when a collection title is empty."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message="Collection title cannot be empty.",
            suggestion="Insert the title of the collection.",
            status_code=400,
        )


class NoOpenCollectionError(KnownError):
    """Raised when an operation needs a created or loaded collection."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.NO_OPEN_COLLECTION,
            message="No collection is open.",
            suggestion="Create or load a collection first.",
            status_code=409,
        )


class CollectionSaveError(KnownError):
    """Raised when a collection cannot be encoded or written."""

    def __init__(self, identity: UUID, detail: str | None = None):
        self.identity = identity
        super().__init__(
            kind=FailureKind.NOT_SAVED,
            message=NOT_SAVED_MESSAGE,
            detail=detail,
            status_code=500,
        )


class CollectionDecodeError(KnownError):
    """Raised when stored bytes do not decode into a collection."""

    def __init__(self, detail: str | None = None):
        super().__init__(
            kind=FailureKind.DECODE_FAILED,
            message="The collection file is unreadable.",
            detail=detail,
            status_code=422,
        )


# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

SAVED_MESSAGE = "Saved"
CREATED_MESSAGE = "Created"
DELETED_MESSAGE = "Deleted"
NOT_SAVED_MESSAGE = "Not saved, try again!"
NOT_CREATED_MESSAGE = "Not created, try again!"
NOT_DELETED_MESSAGE = "Not deleted, try again!"

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: "Something went wrong. Try again.",
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


# =============================================================================
# RESPONSE BOUNDARY
# =============================================================================

# Identities of responses that went through finalize_response()
_finalized_responses: set[int] = set()


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response at the single exit point for failures.

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    _finalized_responses.add(id(response))

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through finalize_response()."""
    return id(response) in _finalized_responses


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed; only the exception type is reported as detail.
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
            detail=detail,
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
        ),
    )

    return finalize_response(response)

