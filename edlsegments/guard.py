"""Policies that decide whether an item's EDL file was already processed."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from edlsegments.fsutil import LocalFileSystem, sidecar_path
from edlsegments.models import MediaItem

logger = logging.getLogger(__name__)

DEFAULT_MARKER_EXTENSION = ".edl.processed"


class ProcessedGuard(Protocol):
    def is_processed(self, item: MediaItem) -> bool: ...

    def mark_processed(self, item: MediaItem) -> None: ...


class NoGuard:
    """Always reprocess."""

    def is_processed(self, item: MediaItem) -> bool:
        return False

    def mark_processed(self, item: MediaItem) -> None:
        pass


class MarkerFileGuard:
    """Skip items that have a marker file next to their media file.

    The marker holds a timestamp for humans; only its presence matters.
    Once written, later edits to the EDL file are ignored until the marker
    is removed.
    """

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        extension: str = DEFAULT_MARKER_EXTENSION,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.extension = extension

    def marker_path(self, item: MediaItem) -> Path:
        return sidecar_path(item.path, self.extension)

    def is_processed(self, item: MediaItem) -> bool:
        return self.fs.exists(self.marker_path(item))

    def mark_processed(self, item: MediaItem) -> None:
        path = self.marker_path(item)
        self.fs.write_text(path, datetime.now(timezone.utc).isoformat())
        logger.debug("Wrote marker file %s for item %s", path, item.id)
