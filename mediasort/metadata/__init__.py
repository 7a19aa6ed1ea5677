"""Metadata providers for embedded and container dates."""

from mediasort.metadata.providers import (
    DATE_CREATED,
    DATE_ENCODED,
    DATE_TAKEN,
    MetadataProvider,
    PillowExifProvider,
    ExifReadProvider,
    ImageExifProvider,
    MediaInfoVideoProvider,
    parse_exif_datetime,
    parse_mediainfo_datetime,
    register_heif_support,
    default_image_provider,
    default_video_provider,
)

__all__ = [
    "DATE_CREATED",
    "DATE_ENCODED",
    "DATE_TAKEN",
    "MetadataProvider",
    "PillowExifProvider",
    "ExifReadProvider",
    "ImageExifProvider",
    "MediaInfoVideoProvider",
    "parse_exif_datetime",
    "parse_mediainfo_datetime",
    "register_heif_support",
    "default_image_provider",
    "default_video_provider",
]
