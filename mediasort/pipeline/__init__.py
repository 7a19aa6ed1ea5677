"""Media organization pipeline."""

from mediasort.pipeline.organizer import (
    FileReport,
    MediaOrganizer,
    organize_folder,
)

__all__ = [
    "FileReport",
    "MediaOrganizer",
    "organize_folder",
]
