"""Move outcome models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class MoveOutcome(Enum):
    """Result of relocating one file."""

    MOVED = "Moved"
    SKIPPED_ALREADY_IN_PLACE = "SkippedAlreadyInPlace"
    SKIPPED_DRY_RUN = "SkippedDryRun"
    SKIPPED_CONFLICT = "SkippedConflict"
    FAILED_SOURCE_MISSING = "FailedSourceMissing"
    FAILED_VERIFICATION = "FailedVerification"
    FAILED_EXCEPTION = "FailedException"

    @property
    def is_skip(self) -> bool:
        """Check if the file was left where it was on purpose."""
        return self in (
            MoveOutcome.SKIPPED_ALREADY_IN_PLACE,
            MoveOutcome.SKIPPED_DRY_RUN,
            MoveOutcome.SKIPPED_CONFLICT,
        )

    @property
    def is_failure(self) -> bool:
        """Check if the move was attempted and failed."""
        return self in (
            MoveOutcome.FAILED_SOURCE_MISSING,
            MoveOutcome.FAILED_VERIFICATION,
            MoveOutcome.FAILED_EXCEPTION,
        )


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move with its target.

    Attributes:
        outcome: What happened to the file.
        target: Final (or intended) path of the file.
        error: Error message for failed outcomes.
    """

    outcome: MoveOutcome
    target: Path
    error: Optional[str] = None
