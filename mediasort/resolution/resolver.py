"""Prioritized date resolution chain."""

from datetime import datetime
from typing import List, Optional, Sequence

from loguru import logger

from mediasort.metadata.providers import (
    MetadataProvider,
    default_image_provider,
    default_video_provider,
)
from mediasort.models.media_file import MediaFile
from mediasort.models.resolution import DateResolution
from mediasort.resolution.strategies import (
    Clock,
    ExifDateStrategy,
    FilesystemTimestampStrategy,
    ResolverStrategy,
    VideoMetadataStrategy,
)


def default_strategies(
    image_provider: Optional[MetadataProvider] = None,
    video_provider: Optional[MetadataProvider] = None,
) -> List[ResolverStrategy]:
    """
    Build the standard strategy chain, most trusted first.

    Args:
        image_provider: Provider for embedded image metadata.
        video_provider: Provider for video container metadata.

    Returns:
        EXIF, video metadata and filesystem strategies.
    """
    return [
        ExifDateStrategy(image_provider or default_image_provider()),
        VideoMetadataStrategy(video_provider or default_video_provider()),
        FilesystemTimestampStrategy(),
    ]


class DateResolver:
    """
    Resolve one date per file from an ordered list of strategies.

    The first strategy that returns a result wins; there is no
    reconciliation between sources. The last strategy must always
    succeed so that resolve() never comes back empty.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[ResolverStrategy]] = None,
        clock: Clock = datetime.now,
    ):
        self.strategies = list(strategies) if strategies is not None else default_strategies()
        if not self.strategies or not isinstance(self.strategies[-1], FilesystemTimestampStrategy):
            self.strategies.append(FilesystemTimestampStrategy())
        self.clock = clock

    def resolve(self, media: MediaFile) -> DateResolution:
        """
        Resolve the acquisition date of a file.

        Args:
            media: File snapshot.

        Returns:
            DateResolution with the date and the strategy that produced it.
        """
        now = self.clock()
        resolution = None

        for strategy in self.strategies:
            if not strategy.applies_to(media):
                continue
            try:
                result = strategy.attempt(media, now)
            except Exception as e:
                logger.debug(f"{type(strategy).__name__} failed for {media.name}: {e}")
                continue
            if result is not None:
                resolution = DateResolution(result.date, result.source, result.detail)
                break

        if resolution is None:
            # Unreachable with a filesystem strategy at the end of the chain
            fallback = FilesystemTimestampStrategy().attempt(media, now)
            resolution = DateResolution(fallback.date, fallback.source, fallback.detail)

        logger.debug(
            f"{media.name}: {resolution.date:%Y-%m-%d %H:%M:%S} "
            f"from {resolution.source.value} ({resolution.detail})"
        )

        if resolution.date.date() == now.date():
            logger.warning(
                f"{media.name}: resolved date is today, metadata may be missing"
            )

        return resolution
