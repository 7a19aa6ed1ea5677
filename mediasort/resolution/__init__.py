"""Date resolution strategies and chain."""

from mediasort.resolution.strategies import (
    StrategyResult,
    ResolverStrategy,
    MetadataStrategy,
    ExifDateStrategy,
    VideoMetadataStrategy,
    FilesystemTimestampStrategy,
    check_plausible,
)
from mediasort.resolution.resolver import DateResolver, default_strategies

__all__ = [
    "StrategyResult",
    "ResolverStrategy",
    "MetadataStrategy",
    "ExifDateStrategy",
    "VideoMetadataStrategy",
    "FilesystemTimestampStrategy",
    "check_plausible",
    "DateResolver",
    "default_strategies",
]
