"""Configuration and CLI handling."""

from mediasort.config.settings import (
    EXT_IMAGE,
    EXT_VIDEO,
    ALL_EXTENSIONS,
    MEDIA_PATTERNS,
    MIN_PLAUSIBLE_DATE,
    MONTH_ABBREVIATIONS,
    DEFAULT_LOG_FILE,
)

__all__ = [
    "EXT_IMAGE",
    "EXT_VIDEO",
    "ALL_EXTENSIONS",
    "MEDIA_PATTERNS",
    "MIN_PLAUSIBLE_DATE",
    "MONTH_ABBREVIATIONS",
    "DEFAULT_LOG_FILE",
]
