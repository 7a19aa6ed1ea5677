"""Tests for file discovery functions."""

import pytest

from mediasort.exceptions import InvalidSourceFolderError
from mediasort.filesystem.discovery import (
    validate_source_folder,
    enumerate_media_files,
    count_media_files,
)


class TestValidateSourceFolder:
    """Tests for validate_source_folder function."""

    def test_accepts_directory(self, tmp_path):
        """Returns the absolute folder path."""
        assert validate_source_folder(tmp_path) == tmp_path.absolute()

    def test_rejects_missing_folder(self, tmp_path):
        """Raises for a folder that does not exist."""
        missing = tmp_path / "missing"
        with pytest.raises(InvalidSourceFolderError) as exc_info:
            validate_source_folder(missing)
        assert exc_info.value.path == missing

    def test_rejects_file(self, tmp_path):
        """Raises when the path is a file."""
        path = tmp_path / "photo.jpg"
        path.touch()
        with pytest.raises(InvalidSourceFolderError, match="not a directory"):
            validate_source_folder(path)


class TestEnumerateMediaFiles:
    """Tests for enumerate_media_files function."""

    def test_finds_media_case_insensitive(self, media_folder):
        """Matches extensions regardless of case."""
        names = [media.name for media in enumerate_media_files(media_folder)]
        assert names == ["beach.jpg", "clip.mp4", "party.JPG"]

    def test_ignores_other_extensions(self, media_folder):
        """Non-media files are left out."""
        names = {media.name for media in enumerate_media_files(media_folder)}
        assert "notes.txt" not in names

    def test_not_recursive(self, media_folder):
        """Files in subfolders are not listed."""
        sub = media_folder / "2020" / "06_JUN"
        sub.mkdir(parents=True)
        (sub / "old.jpg").touch()

        names = {media.name for media in enumerate_media_files(media_folder)}

        assert "old.jpg" not in names

    def test_ignores_directories_named_like_media(self, media_folder):
        """Only regular files are listed."""
        (media_folder / "album.jpg").mkdir()

        names = {media.name for media in enumerate_media_files(media_folder)}

        assert "album.jpg" not in names

    def test_deduplicates_overlapping_patterns(self, media_folder):
        """A file matching several patterns is listed once."""
        result = enumerate_media_files(media_folder, patterns=["*.jpg", "*.JPG", "*.Jpg"])

        paths = [media.path for media in result]
        assert len(paths) == len(set(paths)) == 2

    def test_returns_absolute_paths(self, media_folder):
        """Each snapshot has an absolute path."""
        assert all(media.path.is_absolute() for media in enumerate_media_files(media_folder))

    def test_empty_folder(self, tmp_path):
        """Empty folder gives an empty list."""
        assert enumerate_media_files(tmp_path) == []

    def test_missing_folder_raises(self, tmp_path):
        """Missing folder is fatal."""
        with pytest.raises(InvalidSourceFolderError):
            enumerate_media_files(tmp_path / "missing")


class TestCountMediaFiles:
    """Tests for count_media_files function."""

    def test_counts_distinct_files(self, media_folder):
        """Counts media files only."""
        assert count_media_files(media_folder) == 3
