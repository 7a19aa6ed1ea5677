"""Filesystem operations for media organization."""

from mediasort.filesystem.discovery import (
    validate_source_folder,
    enumerate_media_files,
    count_media_files,
)
from mediasort.filesystem.paths import (
    month_folder,
    destination_for,
    destination_dir,
    destination_path,
)
from mediasort.filesystem.mover import (
    ConflictPolicy,
    same_path,
    ensure_unique_destination,
    apply_conflict_policy,
    move_media_file,
)

__all__ = [
    "validate_source_folder",
    "enumerate_media_files",
    "count_media_files",
    "month_folder",
    "destination_for",
    "destination_dir",
    "destination_path",
    "ConflictPolicy",
    "same_path",
    "ensure_unique_destination",
    "apply_conflict_policy",
    "move_media_file",
]
