"""
Failure classification for cardset loading.

Every way a cardset can be refused, and every way a single card image can
go missing, is named by a FailureKind. Failures are local: a rejected
cardset never affects other cardsets, and a missing card image never
affects the rest of the deck.

Failure values:
- CardsetParseError: config.txt could not be turned into a descriptor
- AssetUnavailable: the card identifier has no image in this cardset
- FailureDetail: serialisable record of either, for reports
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # File level
    MISSING_FILE = "missing_file"
    TOO_FEW_LINES = "too_few_lines"

    # Header line
    BAD_MAGIC = "bad_magic"
    BAD_VERSION = "bad_version"
    BAD_HEADER_FIELD = "bad_header_field"
    UNSUPPORTED_DECK_TYPE = "unsupported_deck_type"
    MISSING_EXTENSION = "missing_extension"

    # Remaining lines
    MISSING_NAME = "missing_name"
    BAD_GEOMETRY = "bad_geometry"
    NO_BACKS = "no_backs"

    # Descriptor built with inconsistent fields
    INVARIANT_VIOLATION = "invariant_violation"

    # Card images
    ASSET_UNAVAILABLE = "asset_unavailable"
    IMAGE_DECODE_FAILED = "image_decode_failed"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )


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
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(kind=self.kind, message=self.message, detail=self.detail)


class CardsetParseError(KnownError):
    """
    Raised when a cardset config cannot be accepted.

    The whole cardset is refused. No partially built descriptor survives.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        config_path: Path | None = None,
    ):
        self.config_path = config_path
        super().__init__(kind=kind, message=message, detail=detail)

    def __str__(self) -> str:
        if self.config_path is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.config_path}: {self.kind.value}: {self.message}"


@dataclass(frozen=True, slots=True)
class AssetUnavailable:
    """
    A card identifier that has no image in the cardset.

    This is an expected outcome, not an error: callers draw a blank or a
    placeholder and carry on.

    Attributes:
        card_id: The identifier that was asked for
        reason: Why there is no asset
    """

    card_id: int
    reason: str

    kind = FailureKind.ASSET_UNAVAILABLE

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=f"No image for card {self.card_id}",
            detail=self.reason,
        )
