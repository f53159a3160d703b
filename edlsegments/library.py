"""Item repositories: resolve item ids to media paths."""

import json
import logging
import uuid
from pathlib import Path
from typing import Iterable, Protocol

from edlsegments.models import MediaItem

logger = logging.getLogger(__name__)


class ItemRepository(Protocol):
    def lookup(self, item_id: uuid.UUID) -> MediaItem | None: ...


class InMemoryLibrary:
    """Item repository backed by a dict."""

    def __init__(self, items: Iterable[MediaItem] = ()) -> None:
        self._items: dict[uuid.UUID, MediaItem] = {item.id: item for item in items}

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: MediaItem) -> None:
        self._items[item.id] = item

    def lookup(self, item_id: uuid.UUID) -> MediaItem | None:
        return self._items.get(item_id)


def load_library(path: str | Path) -> InMemoryLibrary:
    """Load items from a JSON library file.

    Expected shape::

        {"items": [{"id": "<uuid>", "path": "show/s01e01.mkv",
                    "has_media_sources": true}]}

    Relative media paths resolve against the library file's directory.
    """
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ValueError("Library must contain an 'items' list")

    items: list[MediaItem] = []
    for entry in data["items"]:
        if not isinstance(entry, dict):
            raise ValueError("Library items must contain JSON objects")
        if not isinstance(entry.get("id"), str) or not isinstance(entry.get("path"), str):
            raise ValueError("Library items must contain 'id' and 'path' string fields")
        media_path = Path(entry["path"])
        if not media_path.is_absolute():
            media_path = path.parent / media_path
        items.append(
            MediaItem(
                id=uuid.UUID(entry["id"]),
                path=media_path,
                has_media_sources=bool(entry.get("has_media_sources", True)),
            )
        )

    logger.info("Loaded %d items from %s", len(items), path)
    return InMemoryLibrary(items)
