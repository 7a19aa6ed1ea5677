"""Organization run loop."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger
from tqdm import tqdm

from mediasort.filesystem.discovery import enumerate_media_files, validate_source_folder
from mediasort.filesystem.mover import ConflictPolicy, move_media_file
from mediasort.filesystem.paths import destination_dir, destination_for
from mediasort.models.media_file import MediaFile
from mediasort.models.outcome import MoveResult
from mediasort.models.resolution import DateResolution, Destination
from mediasort.models.summary import RunSummary
from mediasort.resolution.resolver import DateResolver


@dataclass(frozen=True)
class FileReport:
    """
    Everything decided for one file.

    Attributes:
        media: File snapshot.
        resolution: Resolved date and its source.
        destination: Year and month folder.
        result: Move outcome and target path.
    """

    media: MediaFile
    resolution: DateResolution
    destination: Destination
    result: MoveResult


class MediaOrganizer:
    """
    Resolve, place and move media files one at a time.

    Files are processed sequentially; a failure on one file is recorded
    and the loop moves on. Counters live in the RunSummary returned by
    process_files(), per-file details in reports.
    """

    def __init__(
        self,
        root: Path,
        dry_run: bool = False,
        on_conflict: ConflictPolicy = ConflictPolicy.OVERWRITE,
        resolver: Optional[DateResolver] = None,
        show_progress: bool = True,
    ):
        """
        Initialize the organizer.

        Args:
            root: Source root, also the root of the destination tree.
            dry_run: If True, simulate moves.
            on_conflict: Policy for existing files at the destination.
            resolver: Date resolver (default chain when None).
            show_progress: If True, display a tqdm progress bar.
        """
        self.root = Path(root).absolute()
        self.dry_run = dry_run
        self.on_conflict = on_conflict
        self.resolver = resolver or DateResolver()
        self.show_progress = show_progress
        self.reports: List[FileReport] = []

    def process_file(self, media: MediaFile) -> FileReport:
        """
        Resolve, place and move a single file.

        Args:
            media: File snapshot.

        Returns:
            FileReport for the file.
        """
        resolution = self.resolver.resolve(media)
        destination = destination_for(resolution.date)
        result = move_media_file(
            media,
            destination_dir(self.root, resolution.date),
            dry_run=self.dry_run,
            on_conflict=self.on_conflict,
        )
        logger.debug(
            f"{media.name}: {resolution.source.value} -> "
            f"{destination.relative.as_posix()} [{result.outcome.value}]"
        )
        report = FileReport(media, resolution, destination, result)
        self.reports.append(report)
        return report

    def process_files(self, files: Iterable[MediaFile]) -> RunSummary:
        """
        Process files in order.

        Args:
            files: File snapshots to organize.

        Returns:
            RunSummary for these files.
        """
        files = list(files)
        summary = RunSummary(dry_run=self.dry_run)

        with tqdm(
            files,
            desc="Organizing",
            unit="file",
            disable=not self.show_progress,
        ) as pbar:
            for media in pbar:
                pbar.set_postfix_str(f"{media.name[:30]}")
                report = self.process_file(media)
                summary.record(report.resolution, report.result)

        logger.info(
            f"Processed {summary.processed}: moved {summary.moved}, "
            f"skipped {summary.skipped}, failed {summary.failed}"
        )
        return summary


def organize_folder(
    root: Path,
    dry_run: bool = False,
    on_conflict: ConflictPolicy = ConflictPolicy.OVERWRITE,
    resolver: Optional[DateResolver] = None,
    show_progress: bool = False,
) -> RunSummary:
    """
    Enumerate and organize the media files of a folder.

    Args:
        root: Folder to organize.
        dry_run: If True, simulate moves.
        on_conflict: Policy for existing files at the destination.
        resolver: Date resolver (default chain when None).
        show_progress: If True, display a progress bar.

    Returns:
        RunSummary of the run (all zero when no file matched).

    Raises:
        InvalidSourceFolderError: If root is missing or not a directory.
    """
    root = validate_source_folder(root)
    files = enumerate_media_files(root)
    organizer = MediaOrganizer(
        root,
        dry_run=dry_run,
        on_conflict=on_conflict,
        resolver=resolver,
        show_progress=show_progress,
    )
    return organizer.process_files(files)
