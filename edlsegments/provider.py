"""Segment provider: finds an item's EDL sidecar and parses it."""

import asyncio
import logging
from typing import Protocol

from edlsegments.config import ProviderConfig
from edlsegments.fsutil import LocalFileSystem, sidecar_path
from edlsegments.guard import MarkerFileGuard, NoGuard, ProcessedGuard
from edlsegments.library import ItemRepository
from edlsegments.models import MediaItem, Segment, SegmentRequest
from edlsegments.parser import parse_segments

logger = logging.getLogger(__name__)


class CancelSignal(Protocol):
    """Anything with ``is_set()``: threading.Event or asyncio.Event."""

    def is_set(self) -> bool: ...


def _check_cancelled(cancel: CancelSignal | None) -> None:
    if cancel is not None and cancel.is_set():
        raise asyncio.CancelledError()


class EdlSegmentProvider:
    """Provide media segments for items that have an EDL file beside them."""

    name = "EDL to Media Segments Provider"

    def __init__(
        self,
        items: ItemRepository,
        fs: LocalFileSystem | None = None,
        guard: ProcessedGuard | None = None,
        config: ProviderConfig | None = None,
    ) -> None:
        self.items = items
        self.fs = fs or LocalFileSystem()
        self.config = config or ProviderConfig()
        if guard is None:
            if self.config.use_marker_guard:
                guard = MarkerFileGuard(self.fs, self.config.marker_extension)
            else:
                guard = NoGuard()
        self.guard = guard

    def supports(self, item: MediaItem) -> bool:
        return item.has_media_sources

    async def get_media_segments(
        self,
        request: SegmentRequest,
        cancel: CancelSignal | None = None,
    ) -> list[Segment]:
        """Return the segments for ``request.item_id``.

        An unknown item, an item without media sources, a missing EDL file
        or an already-processed item all yield an empty list. Raises
        asyncio.CancelledError if *cancel* is set around the file access;
        OSErrors from the filesystem propagate.
        """
        _check_cancelled(cancel)

        item = self.items.lookup(request.item_id)
        if item is None:
            logger.debug("Item %s not found", request.item_id)
            return []
        if not self.supports(item):
            logger.debug("Item %s has no media sources", request.item_id)
            return []

        edl_path = sidecar_path(item.path, self.config.edl_extension)
        _check_cancelled(cancel)
        if not await asyncio.to_thread(self.fs.exists, edl_path):
            logger.debug("EDL file %s does not exist for item %s", edl_path, request.item_id)
            return []

        _check_cancelled(cancel)
        if await asyncio.to_thread(self.guard.is_processed, item):
            logger.info("EDL file %s already processed for item %s", edl_path, request.item_id)
            return []

        logger.info("Found EDL file %s for item %s", edl_path, request.item_id)
        _check_cancelled(cancel)
        lines = await asyncio.to_thread(self.fs.read_all_lines, edl_path)
        _check_cancelled(cancel)

        # The resolved item's id, which may differ from the requested one
        segments = parse_segments(lines, item.id)

        await asyncio.to_thread(self.guard.mark_processed, item)
        logger.info("Parsed %d segments from %s", len(segments), edl_path)
        return segments
