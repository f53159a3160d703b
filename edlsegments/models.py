"""Shared data types used across EDL Segments."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

TICKS_PER_SECOND = 10_000_000


class SegmentType(Enum):
    """Segment categories the host media library recognizes."""

    UNKNOWN = "Unknown"
    INTRO = "Intro"
    PREVIEW = "Preview"
    RECAP = "Recap"
    COMMERCIAL = "Commercial"
    OUTRO = "Outro"


@dataclass(frozen=True)
class Segment:
    """A classified time range within a media item, in 100ns ticks."""

    item_id: uuid.UUID
    type: SegmentType
    start_ticks: int
    end_ticks: int
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "item_id": str(self.item_id),
            "type": self.type.value,
            "start_ticks": self.start_ticks,
            "end_ticks": self.end_ticks,
        }


@dataclass
class MediaItem:
    """An item as returned by the item repository."""

    id: uuid.UUID
    path: Path
    has_media_sources: bool = True


@dataclass
class SegmentRequest:
    """A host request for the segments of one item."""

    item_id: uuid.UUID
