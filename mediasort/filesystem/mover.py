"""Verified file moves."""

import os
import shutil
from enum import Enum
from itertools import count
from pathlib import Path
from typing import Optional

from loguru import logger

from mediasort.models.media_file import MediaFile
from mediasort.models.outcome import MoveOutcome, MoveResult


class ConflictPolicy(Enum):
    """What to do when a file with the same name exists at the destination."""

    OVERWRITE = "overwrite"
    SKIP = "skip"
    RENAME = "rename"


def same_path(first: Path, second: Path) -> bool:
    """Compare two paths the way the host filesystem does."""
    return os.path.normcase(os.path.abspath(first)) == os.path.normcase(os.path.abspath(second))


def ensure_unique_destination(media: MediaFile, target_dir: Path) -> Path:
    """
    First free name for a media file in its destination folder.

    Tries the file's own name, then name_1.ext, name_2.ext and so on.
    Only looks at the folder, so dry runs can use it too.
    """
    candidate = target_dir / media.name
    for counter in count(1):
        if not candidate.exists():
            break
        candidate = target_dir / f"{media.path.stem}_{counter}{media.path.suffix}"

    if candidate.name != media.name:
        logger.info(f"{media.name} exists in {target_dir}, using {candidate.name}")
    return candidate


def apply_conflict_policy(
    media: MediaFile,
    target: Path,
    on_conflict: ConflictPolicy,
) -> Optional[Path]:
    """
    Work out where a file ends up when its target may already exist.

    Reads the destination folder but never changes it.

    Returns:
        The path to move to, or None when the file must stay where it is.
    """
    if not target.exists():
        return target
    if on_conflict is ConflictPolicy.SKIP:
        logger.warning(f"Destination file exists, leaving {media.name} in place: {target}")
        return None
    if on_conflict is ConflictPolicy.RENAME:
        return ensure_unique_destination(media, target.parent)
    logger.warning(f"Destination file exists and will be overwritten: {target}")
    return target


def move_media_file(
    media: MediaFile,
    target_dir: Path,
    dry_run: bool = False,
    on_conflict: ConflictPolicy = ConflictPolicy.OVERWRITE,
) -> MoveResult:
    """
    Move a file into target_dir and verify the result.

    Never raises: every failure is reported as a MoveOutcome. A move that
    does not complete leaves the file at its source. Dry runs apply the
    conflict policy too, so the reported target is the one a real run
    would use.

    Args:
        media: File to move.
        target_dir: Directory the file belongs in.
        dry_run: If True, only log the intended move.
        on_conflict: Policy for an existing file at the destination.

    Returns:
        MoveResult with the outcome and the final (or intended) path.
    """
    source = media.path
    target = Path(target_dir) / media.name

    if same_path(source, target):
        logger.debug(f"Already in place: {source}")
        return MoveResult(MoveOutcome.SKIPPED_ALREADY_IN_PLACE, target)

    try:
        if dry_run:
            planned = apply_conflict_policy(media, target, on_conflict)
            if planned is None:
                return MoveResult(MoveOutcome.SKIPPED_CONFLICT, target)
            logger.info(f"SIMULATION - Move: {source.name} -> {planned}")
            return MoveResult(MoveOutcome.SKIPPED_DRY_RUN, planned)

        target.parent.mkdir(parents=True, exist_ok=True)

        if not source.exists():
            logger.warning(f"Source file not found: {source}")
            return MoveResult(MoveOutcome.FAILED_SOURCE_MISSING, target, "source vanished")

        planned = apply_conflict_policy(media, target, on_conflict)
        if planned is None:
            return MoveResult(MoveOutcome.SKIPPED_CONFLICT, target)
        target = planned

        shutil.move(str(source), str(target))

        if not target.exists() or source.exists():
            logger.error(
                f"Move verification failed for {source.name}: "
                f"target exists={target.exists()}, source exists={source.exists()}"
            )
            return MoveResult(MoveOutcome.FAILED_VERIFICATION, target, "verification failed")

        logger.info(f"File moved: {target}")
        return MoveResult(MoveOutcome.MOVED, target)

    except Exception as e:
        logger.error(f"Error moving {source}: {e}")
        return MoveResult(MoveOutcome.FAILED_EXCEPTION, target, str(e))
