"""Custom exceptions for media organization errors."""

from pathlib import Path


class MediaSortError(Exception):
    """Base class for all mediasort errors."""

    pass


class InvalidSourceFolderError(MediaSortError):
    """Source folder is missing or is not a directory."""

    def __init__(self, path: Path, reason: str = "does not exist"):
        self.path = path
        self.reason = reason
        super().__init__(f"Source folder {path} {reason}")


class MetadataUnavailableError(MediaSortError):
    """Metadata could not be read or parsed for a file."""

    pass


class ImplausibleMetadataError(MetadataUnavailableError):
    """Metadata parsed to a date outside the plausibility window."""

    pass
