"""Run summary counters."""

from dataclasses import dataclass

from mediasort.models.outcome import MoveOutcome, MoveResult
from mediasort.models.resolution import DateResolution


@dataclass
class RunSummary:
    """
    Counters for one organization run.

    Owned by the run loop and returned as a value; counters only
    ever increase through record().
    """

    processed: int = 0
    moved: int = 0
    skipped: int = 0
    failed: int = 0
    with_metadata: int = 0
    without_metadata: int = 0
    dry_run: bool = False

    def record(self, resolution: DateResolution, result: MoveResult) -> None:
        """
        Account for one processed file.

        Args:
            resolution: Date resolution of the file.
            result: Move result of the file.
        """
        self.processed += 1

        if result.outcome is MoveOutcome.MOVED:
            self.moved += 1
        elif result.outcome.is_skip:
            self.skipped += 1
        elif result.outcome.is_failure:
            self.failed += 1

        if resolution.source.has_metadata:
            self.with_metadata += 1
        else:
            self.without_metadata += 1

    def __add__(self, other: "RunSummary") -> "RunSummary":
        if not isinstance(other, RunSummary):
            return NotImplemented
        return RunSummary(
            processed=self.processed + other.processed,
            moved=self.moved + other.moved,
            skipped=self.skipped + other.skipped,
            failed=self.failed + other.failed,
            with_metadata=self.with_metadata + other.with_metadata,
            without_metadata=self.without_metadata + other.without_metadata,
            dry_run=self.dry_run or other.dry_run,
        )
