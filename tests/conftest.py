"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pytest
from loguru import logger

from mediasort.exceptions import MetadataUnavailableError
from mediasort.metadata.providers import MetadataProvider
from mediasort.models.media_file import MediaFile
from mediasort.resolution.resolver import DateResolver, default_strategies

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


class FakeProvider(MetadataProvider):
    """Provider returning canned values per file name."""

    name = "fake"

    def __init__(self, values: Optional[Dict[str, Dict[str, str]]] = None, fail: bool = False):
        self.values = values or {}
        self.fail = fail
        self.calls = []

    def read(self, path: Path) -> Dict[str, str]:
        self.calls.append(path)
        if self.fail:
            raise MetadataUnavailableError(f"cannot read {path.name}")
        return dict(self.values.get(path.name, {}))


@pytest.fixture
def fixed_now():
    """Clock reading shared by resolver tests."""
    return FIXED_NOW


@pytest.fixture
def fake_provider():
    """Factory for fake metadata providers."""
    return FakeProvider


@pytest.fixture
def make_media(tmp_path):
    """Factory for MediaFile snapshots with chosen timestamps."""
    def _make(
        name: str,
        created: datetime = datetime(2020, 6, 1, 9, 0, 0),
        modified: datetime = datetime(2022, 1, 1, 9, 0, 0),
        directory: Optional[Path] = None,
        touch: bool = False,
    ) -> MediaFile:
        path = (directory or tmp_path) / name
        if touch:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"media content")
        return MediaFile(
            path=path.absolute(),
            extension=path.suffix.lower().lstrip("."),
            created=created,
            modified=modified,
        )
    return _make


@pytest.fixture
def make_resolver():
    """Factory for resolvers built on fake providers and a fixed clock."""
    def _make(
        image_values: Optional[Dict[str, Dict[str, str]]] = None,
        video_values: Optional[Dict[str, Dict[str, str]]] = None,
        now: datetime = FIXED_NOW,
    ) -> DateResolver:
        return DateResolver(
            default_strategies(FakeProvider(image_values), FakeProvider(video_values)),
            clock=lambda: now,
        )
    return _make


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def media_folder(tmp_path):
    """Folder with a mix of media and non-media files."""
    root = tmp_path / "inbox"
    root.mkdir()
    for name in ("beach.jpg", "party.JPG", "clip.mp4", "notes.txt"):
        (root / name).write_bytes(b"content of " + name.encode())
    return root
