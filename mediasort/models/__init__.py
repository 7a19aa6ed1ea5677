"""Data models for media organization."""

from mediasort.models.media_file import MediaFile
from mediasort.models.resolution import DateResolution, DateSource, Destination
from mediasort.models.outcome import MoveOutcome, MoveResult
from mediasort.models.summary import RunSummary

__all__ = [
    "MediaFile",
    "DateResolution",
    "DateSource",
    "Destination",
    "MoveOutcome",
    "MoveResult",
    "RunSummary",
]
