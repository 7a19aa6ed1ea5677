"""Media file snapshot model."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from mediasort.config.settings import EXT_IMAGE, EXT_VIDEO


def _creation_timestamp(stat: os.stat_result) -> float:
    """
    Return the file creation time from a stat result.

    Uses st_birthtime where the platform exposes it (macOS, BSD,
    Windows on Python 3.12+), otherwise st_ctime.
    """
    return getattr(stat, "st_birthtime", stat.st_ctime)


@dataclass(frozen=True)
class MediaFile:
    """
    Immutable snapshot of a media file taken at enumeration time.

    Timestamps are read once and never refreshed during a run.

    Attributes:
        path: Absolute path, identity of the file.
        extension: Lower-cased extension without the leading dot.
        created: Filesystem creation time.
        modified: Filesystem last-write time.
    """

    path: Path
    extension: str
    created: datetime
    modified: datetime

    @classmethod
    def from_path(cls, path: Path) -> "MediaFile":
        """
        Build a snapshot from a file on disk.

        Args:
            path: Path to an existing regular file.

        Returns:
            MediaFile with timestamps from a single stat call.
        """
        path = Path(path).absolute()
        stat = path.stat()
        return cls(
            path=path,
            extension=path.suffix.lower().lstrip("."),
            created=datetime.fromtimestamp(_creation_timestamp(stat)),
            modified=datetime.fromtimestamp(stat.st_mtime),
        )

    @property
    def name(self) -> str:
        """File name with extension."""
        return self.path.name

    def is_image(self) -> bool:
        """Check if this file has an image extension."""
        return self.extension in EXT_IMAGE

    def is_video(self) -> bool:
        """Check if this file has a video extension."""
        return self.extension in EXT_VIDEO
