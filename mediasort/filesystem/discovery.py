"""File discovery functions for finding media files."""

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Dict, List, Sequence

from loguru import logger

from mediasort.config.settings import MEDIA_PATTERNS
from mediasort.exceptions import InvalidSourceFolderError
from mediasort.models.media_file import MediaFile


def validate_source_folder(root: Path) -> Path:
    """
    Check that the source folder exists and is a directory.

    Args:
        root: Folder to organize.

    Returns:
        Absolute path of the folder.

    Raises:
        InvalidSourceFolderError: If the folder is missing or not a directory.
    """
    root = Path(root)
    if not root.exists():
        raise InvalidSourceFolderError(root, "does not exist")
    if not root.is_dir():
        raise InvalidSourceFolderError(root, "is not a directory")
    return root.absolute()


def enumerate_media_files(
    root: Path,
    patterns: Sequence[str] = MEDIA_PATTERNS
) -> List[MediaFile]:
    """
    List media files directly under root.

    Matching is case-insensitive and not recursive. A file matching
    several patterns is listed once.

    Args:
        root: Folder to scan.
        patterns: Glob patterns such as "*.jpg".

    Returns:
        MediaFile snapshots sorted by path.

    Raises:
        InvalidSourceFolderError: If root is missing or not a directory.
    """
    root = validate_source_folder(root)
    lowered = [pattern.lower() for pattern in patterns]

    entries = [entry for entry in root.iterdir() if entry.is_file()]
    found: Dict[Path, MediaFile] = {}

    for pattern in lowered:
        for entry in entries:
            path = entry.absolute()
            if path in found or not fnmatchcase(entry.name.lower(), pattern):
                continue
            try:
                found[path] = MediaFile.from_path(path)
            except OSError as e:
                logger.warning(f"Cannot read {entry.name}: {e}")

    logger.info(f"{len(found)} media files found in {root}")
    return [found[path] for path in sorted(found)]


def count_media_files(root: Path, patterns: Sequence[str] = MEDIA_PATTERNS) -> int:
    """
    Count media files directly under root.

    Args:
        root: Folder to scan.
        patterns: Glob patterns such as "*.jpg".

    Returns:
        Number of distinct matching files.
    """
    return len(enumerate_media_files(root, patterns))
