"""Shared test fixtures."""

import json
import uuid
from pathlib import Path

import pytest

from edlsegments.library import InMemoryLibrary
from edlsegments.models import MediaItem

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ITEM_ID = uuid.UUID("6f1c2a5e-8d3b-4c1e-9a7f-2b4d6e8f0a1c")


@pytest.fixture
def sample_edl_path() -> Path:
    return FIXTURES_DIR / "sample.edl"


@pytest.fixture
def sample_config_path() -> Path:
    return FIXTURES_DIR / "sample_config.json"


@pytest.fixture
def media_item(tmp_path: Path) -> MediaItem:
    media = tmp_path / "episode.mkv"
    media.write_bytes(b"")
    return MediaItem(id=ITEM_ID, path=media)


@pytest.fixture
def library(media_item: MediaItem) -> InMemoryLibrary:
    return InMemoryLibrary([media_item])


@pytest.fixture
def library_file(tmp_path: Path, media_item: MediaItem) -> Path:
    path = tmp_path / "library.json"
    path.write_text(json.dumps({
        "items": [{"id": str(media_item.id), "path": media_item.path.name}],
    }))
    return path
