"""Destination path functions for media organization."""

from datetime import datetime
from pathlib import Path

from mediasort.config.settings import MONTH_ABBREVIATIONS
from mediasort.models.media_file import MediaFile
from mediasort.models.resolution import Destination


def month_folder(date: datetime) -> str:
    """
    Format the month folder name for a date.

    Args:
        date: Any date.

    Returns:
        Zero-padded month and upper-case abbreviation, e.g. "03_MAR".
    """
    return f"{date.month:02d}_{MONTH_ABBREVIATIONS[date.month]}"


def destination_for(date: datetime) -> Destination:
    """Return the year and month folder for a date."""
    return Destination(year=date.year, month_folder=month_folder(date))


def destination_dir(root: Path, date: datetime) -> Path:
    """
    Build the target directory for a date.

    Args:
        root: Source root the tree is built under.
        date: Resolved date.

    Returns:
        root / YYYY / MM_MON
    """
    return Path(root) / destination_for(date).relative


def destination_path(root: Path, media: MediaFile, date: datetime) -> Path:
    """Build the full target path of a file, keeping its name."""
    return destination_dir(root, date) / media.name
