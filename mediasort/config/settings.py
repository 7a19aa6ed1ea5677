"""Configuration settings and constants for the mediasort package."""

from datetime import datetime
from pathlib import Path
from typing import Dict, FrozenSet, Tuple

# Image file extensions (lower-case, without dot)
EXT_IMAGE: FrozenSet[str] = frozenset({
    "jpg", "jpeg", "png", "gif", "bmp", "tiff", "heic", "raw", "cr2", "nef"
})

# Video file extensions (lower-case, without dot)
EXT_VIDEO: FrozenSet[str] = frozenset({
    "mp4", "mov", "avi", "mkv", "wmv", "flv", "m4v", "mpg", "mpeg", "3gp", "webm"
})

ALL_EXTENSIONS: FrozenSet[str] = EXT_IMAGE | EXT_VIDEO

# RAW images, read with exifread instead of Pillow
EXT_RAW: FrozenSet[str] = frozenset({"raw", "cr2", "nef"})

# Glob patterns used by the enumerator, images first
MEDIA_PATTERNS: Tuple[str, ...] = tuple(
    f"*.{ext}" for ext in sorted(EXT_IMAGE)
) + tuple(
    f"*.{ext}" for ext in sorted(EXT_VIDEO)
)

# Metadata dates before this are rejected as implausible
MIN_PLAUSIBLE_DATE = datetime(1990, 1, 1)

# Fixed English abbreviations, independent of the process locale
MONTH_ABBREVIATIONS: Dict[int, str] = {
    1: "JAN", 2: "FEB", 3: "MAR", 4: "APR", 5: "MAY", 6: "JUN",
    7: "JUL", 8: "AUG", 9: "SEP", 10: "OCT", 11: "NOV", 12: "DEC",
}

# EXIF tag ids
EXIF_IFD_POINTER: int = 0x8769
EXIF_DATETIME_ORIGINAL: int = 0x9003
EXIF_DATE_FORMAT: str = "%Y:%m:%d %H:%M:%S"
EXIFREAD_DATETIME_ORIGINAL: str = "EXIF DateTimeOriginal"

# MediaInfo General track properties, in priority order
VIDEO_DATE_ENCODED: str = "encoded_date"
VIDEO_DATE_CREATED: Tuple[str, ...] = ("recorded_date", "tagged_date")

# Strategy confidence levels (0-100)
CONFIDENCE_EXIF: int = 95
CONFIDENCE_VIDEO_METADATA: int = 80
CONFIDENCE_FILESYSTEM: int = 30

# Logging
DEFAULT_LOG_FILE = Path("mediasort.log")
LOG_ROTATION: str = "10 MB"
LOG_RETENTION: str = "7 days"
