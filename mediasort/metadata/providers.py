"""
Metadata providers for image and video files.

A provider reads raw date properties from a file and knows nothing about
resolution order or plausibility. Each provider raises
MetadataUnavailableError when the file cannot be read, so callers only
deal with a single failure type.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from mediasort.config.settings import (
    EXIF_DATE_FORMAT,
    EXIF_DATETIME_ORIGINAL,
    EXIF_IFD_POINTER,
    EXIFREAD_DATETIME_ORIGINAL,
    EXT_RAW,
    VIDEO_DATE_CREATED,
    VIDEO_DATE_ENCODED,
)
from mediasort.exceptions import MetadataUnavailableError

EXIF_DATE_PATTERN = re.compile(r"^\d{4}:\d{2}:\d{2} \d{2}:\d{2}:\d{2}$")
# "+0100" style offsets, which fromisoformat only accepts from Python 3.11
COMPACT_UTC_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")

# Property names exposed by the providers
DATE_TAKEN = "date_taken"
DATE_ENCODED = "date_encoded"
DATE_CREATED = "date_created"


class MetadataProvider(ABC):
    """Read raw date properties from a media file."""

    name: str = "metadata"

    @abstractmethod
    def read(self, path: Path) -> Dict[str, str]:
        """
        Read the date properties of a file.

        Args:
            path: File to inspect.

        Returns:
            Mapping of property name to raw value. Missing properties
            are absent from the mapping.

        Raises:
            MetadataUnavailableError: If the file cannot be read.
        """


@lru_cache(maxsize=None)
def register_heif_support() -> None:
    """Let Pillow open HEIC images through pillow-heif."""
    from pillow_heif import register_heif_opener

    register_heif_opener()


class PillowExifProvider(MetadataProvider):
    """Read the EXIF original capture date with Pillow."""

    name = "exif"

    def read(self, path: Path) -> Dict[str, str]:
        from PIL import Image

        register_heif_support()
        try:
            with Image.open(path) as image:
                exif = image.getexif()
                value = exif.get_ifd(EXIF_IFD_POINTER).get(EXIF_DATETIME_ORIGINAL)
        except Exception as e:
            raise MetadataUnavailableError(f"Cannot read EXIF from {path.name}: {e}") from e

        if value is None:
            return {}
        if isinstance(value, bytes):
            value = value.decode("ascii", errors="replace")
        return {DATE_TAKEN: str(value)}


class ExifReadProvider(MetadataProvider):
    """Read the EXIF original capture date of RAW files with exifread."""

    name = "exifread"

    def read(self, path: Path) -> Dict[str, str]:
        import exifread

        try:
            with open(path, "rb") as f:
                tags = exifread.process_file(f, details=False)
        except Exception as e:
            raise MetadataUnavailableError(f"Cannot read EXIF from {path.name}: {e}") from e

        value = tags.get(EXIFREAD_DATETIME_ORIGINAL)
        if value is None:
            return {}
        return {DATE_TAKEN: str(value)}


class ImageExifProvider(MetadataProvider):
    """
    Dispatch EXIF reads by file type.

    RAW files go to exifread, everything else (HEIC included) to Pillow.
    """

    name = "image"

    def __init__(
        self,
        pillow: Optional[MetadataProvider] = None,
        raw: Optional[MetadataProvider] = None,
    ):
        self.pillow = pillow or PillowExifProvider()
        self.raw = raw or ExifReadProvider()

    def read(self, path: Path) -> Dict[str, str]:
        extension = path.suffix.lower().lstrip(".")
        provider = self.raw if extension in EXT_RAW else self.pillow
        return provider.read(path)


class MediaInfoVideoProvider(MetadataProvider):
    """
    Read encoding and creation dates of a video with MediaInfo.

    "Date encoded" maps to the General track encoded_date, "date created"
    to recorded_date, then tagged_date when the container has no
    recording date.
    """

    name = "mediainfo"

    def read(self, path: Path) -> Dict[str, str]:
        try:
            from pymediainfo import MediaInfo
            mi = MediaInfo.parse(path)
        except Exception as e:
            raise MetadataUnavailableError(f"MediaInfo error for {path.name}: {e}") from e

        general = next(
            (track for track in mi.tracks if track.track_type == "General"),
            None,
        )
        if general is None:
            logger.debug(f"No General track in {path.name}")
            return {}

        values: Dict[str, str] = {}
        encoded = getattr(general, VIDEO_DATE_ENCODED, None)
        if encoded:
            values[DATE_ENCODED] = str(encoded)
        for attribute in VIDEO_DATE_CREATED:
            created = getattr(general, attribute, None)
            if created:
                values[DATE_CREATED] = str(created)
                break
        return values


def parse_exif_datetime(value: str) -> datetime:
    """
    Parse an EXIF date string of the form YYYY:MM:DD HH:MM:SS.

    Args:
        value: Raw EXIF value, possibly NUL padded.

    Returns:
        Naive datetime.

    Raises:
        MetadataUnavailableError: On structural mismatch or invalid date.
    """
    cleaned = value.strip("\x00 ").strip()
    if not EXIF_DATE_PATTERN.match(cleaned):
        raise MetadataUnavailableError(f"Unexpected EXIF date format: {value!r}")
    try:
        return datetime.strptime(cleaned, EXIF_DATE_FORMAT)
    except ValueError as e:
        raise MetadataUnavailableError(f"Invalid EXIF date {value!r}: {e}") from e


def parse_mediainfo_datetime(value: str) -> datetime:
    """
    Parse a MediaInfo date string into a naive local datetime.

    Accepts "UTC 2021-03-15 10:00:00", "2021-03-15 10:00:00 UTC" and ISO
    forms such as "2021-03-15T10:00:00Z" or "2021-03-15T10:00:00+0100".
    Values carrying UTC or an offset are converted to local time;
    unmarked values are taken as local.

    Raises:
        MetadataUnavailableError: If the value is not a timestamp.
    """
    # Multiple values are separated by " / ", keep the first
    text = value.split(" / ")[0].strip()
    is_utc = False

    if text.startswith("UTC"):
        text, is_utc = text[3:].strip(), True
    elif text.endswith("UTC"):
        text, is_utc = text[:-3].strip(), True
    if text.endswith("Z"):
        text, is_utc = text[:-1], True
    text = COMPACT_UTC_OFFSET.sub(r"\1:\2", text)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise MetadataUnavailableError(f"Unparsable video date {value!r}") from e

    if parsed.tzinfo is None:
        if not is_utc:
            return parsed
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone().replace(tzinfo=None)


def default_image_provider() -> MetadataProvider:
    """Return the image metadata provider for this platform."""
    return ImageExifProvider()


def default_video_provider() -> MetadataProvider:
    """Return the video metadata provider for this platform."""
    return MediaInfoVideoProvider()
