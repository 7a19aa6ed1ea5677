"""
Date resolution strategies.

Each strategy attempts to derive a date for a media file and returns None
when it cannot; strategies never raise. The resolver tries them in order
of trust and keeps the first result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from loguru import logger

from mediasort.config.settings import (
    CONFIDENCE_EXIF,
    CONFIDENCE_FILESYSTEM,
    CONFIDENCE_VIDEO_METADATA,
    MIN_PLAUSIBLE_DATE,
)
from mediasort.exceptions import ImplausibleMetadataError, MetadataUnavailableError
from mediasort.metadata.providers import (
    DATE_CREATED,
    DATE_ENCODED,
    DATE_TAKEN,
    MetadataProvider,
    parse_exif_datetime,
    parse_mediainfo_datetime,
)
from mediasort.models.media_file import MediaFile
from mediasort.models.resolution import DateSource

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class StrategyResult:
    """
    Date found by a strategy.

    Attributes:
        date: Resolved date.
        source: Provenance tag.
        confidence: 0-100, higher is more reliable.
        detail: Property or timestamp name the date came from.
    """

    date: datetime
    source: DateSource
    confidence: int
    detail: str = ""


def check_plausible(date: datetime, now: datetime) -> datetime:
    """
    Reject dates outside [MIN_PLAUSIBLE_DATE, now].

    Raises:
        ImplausibleMetadataError: If the date lies outside the window.
    """
    if not MIN_PLAUSIBLE_DATE <= date <= now:
        raise ImplausibleMetadataError(
            f"{date:%Y-%m-%d %H:%M:%S} outside "
            f"[{MIN_PLAUSIBLE_DATE:%Y-%m-%d}, {now:%Y-%m-%d}]"
        )
    return date


class ResolverStrategy(ABC):
    """One method of deriving a date from a file."""

    source: DateSource

    def applies_to(self, media: MediaFile) -> bool:
        """Check whether this strategy should be tried for a file."""
        return True

    @abstractmethod
    def attempt(self, media: MediaFile, now: datetime) -> Optional[StrategyResult]:
        """
        Try to resolve a date.

        Args:
            media: File snapshot.
            now: Current time, upper bound of the plausibility window.

        Returns:
            StrategyResult, or None to let the next strategy try.
        """


class MetadataStrategy(ResolverStrategy):
    """
    Read ordered properties from a metadata provider.

    The first property that parses and passes the plausibility window
    wins. Provider and parser failures are logged at debug level and
    turn into None.
    """

    confidence: int = 50

    def __init__(
        self,
        provider: MetadataProvider,
        properties: Sequence[str],
        parser: Callable[[str], datetime],
    ):
        self.provider = provider
        self.properties = tuple(properties)
        self.parser = parser

    def attempt(self, media: MediaFile, now: datetime) -> Optional[StrategyResult]:
        try:
            values = self.provider.read(media.path)
        except MetadataUnavailableError as e:
            logger.debug(f"{self.provider.name}: {e}")
            return None

        for prop in self.properties:
            raw = values.get(prop)
            if not raw:
                continue
            try:
                date = check_plausible(self.parser(raw), now)
            except MetadataUnavailableError as e:
                logger.debug(f"{media.name}: {prop} rejected ({e})")
                continue
            return StrategyResult(date, self.source, self.confidence, prop)

        logger.debug(f"{media.name}: no usable {self.provider.name} date")
        return None


class ExifDateStrategy(MetadataStrategy):
    """Embedded original capture date of image files."""

    source = DateSource.EXIF
    confidence = CONFIDENCE_EXIF

    def __init__(self, provider: MetadataProvider):
        super().__init__(provider, (DATE_TAKEN,), parse_exif_datetime)

    def applies_to(self, media: MediaFile) -> bool:
        return media.is_image()


class VideoMetadataStrategy(MetadataStrategy):
    """Container "date encoded" then "date created" of video files."""

    source = DateSource.VIDEO_METADATA
    confidence = CONFIDENCE_VIDEO_METADATA

    def __init__(self, provider: MetadataProvider):
        super().__init__(provider, (DATE_ENCODED, DATE_CREATED), parse_mediainfo_datetime)

    def applies_to(self, media: MediaFile) -> bool:
        return media.is_video()


class FilesystemTimestampStrategy(ResolverStrategy):
    """
    Oldest of the filesystem creation and last-write times.

    Copies and moves tend to bump one timestamp but rarely both, so the
    earlier one is the better guess. Always succeeds.
    """

    source = DateSource.CREATION_TIME

    def attempt(self, media: MediaFile, now: datetime) -> Optional[StrategyResult]:
        if media.created <= media.modified:
            return StrategyResult(
                media.created, DateSource.CREATION_TIME, CONFIDENCE_FILESYSTEM, "created"
            )
        return StrategyResult(
            media.modified, DateSource.LAST_WRITE_TIME, CONFIDENCE_FILESYSTEM, "modified"
        )
