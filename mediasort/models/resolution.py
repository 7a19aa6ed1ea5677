"""Date resolution and destination models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class DateSource(Enum):
    """Provenance of a resolved date, in descending order of trust."""

    EXIF = "EXIF"
    VIDEO_METADATA = "VideoMetadata"
    CREATION_TIME = "CreationTime"
    LAST_WRITE_TIME = "LastWriteTime"

    @property
    def has_metadata(self) -> bool:
        """True for dates read from embedded or shell-exposed metadata."""
        return self in (DateSource.EXIF, DateSource.VIDEO_METADATA)


@dataclass(frozen=True)
class DateResolution:
    """
    Date resolved for a file and where it came from.

    Attributes:
        date: Resolved acquisition date, always present.
        source: Strategy that produced the date.
        detail: Property or timestamp name behind the date.
    """

    date: datetime
    source: DateSource
    detail: str = ""


@dataclass(frozen=True)
class Destination:
    """Year and month folder a file belongs in."""

    year: int
    month_folder: str

    @property
    def relative(self) -> Path:
        """Relative directory, e.g. 2021/03_MAR."""
        return Path(f"{self.year:04d}") / self.month_folder
