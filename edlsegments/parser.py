"""EDL line parser: turns ``start stop action`` records into Segments."""

import logging
import re
import uuid
from decimal import Decimal, localcontext
from typing import Iterable

from edlsegments.models import TICKS_PER_SECOND, Segment, SegmentType

logger = logging.getLogger(__name__)

# Plain decimal seconds, "." as the only separator. No NaN/inf, no grouping.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]{1,4})?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Host categories, not the classic EDL meanings (0 cut, 3 commercial break).
_ACTION_TYPES = {
    0: SegmentType.INTRO,
    1: SegmentType.PREVIEW,
    2: SegmentType.RECAP,
    3: SegmentType.COMMERCIAL,
    4: SegmentType.OUTRO,
}


def action_to_segment_type(action: int) -> SegmentType:
    """Map an EDL action code to a segment type; unmapped codes are Unknown."""
    return _ACTION_TYPES.get(action, SegmentType.UNKNOWN)


# Ticks are signed 64-bit on the host side.
_MAX_SECONDS = Decimal(2**63 - 1) / TICKS_PER_SECOND


def is_decimal(text: str) -> bool:
    """True if *text* is plain decimal seconds that fit the tick range."""
    if _DECIMAL_RE.fullmatch(text) is None:
        return False
    return abs(Decimal(text)) <= _MAX_SECONDS


def _parse_int32(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    # Leading zeros are allowed; more significant digits cannot fit.
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 10:
        return None
    value = -int(digits) if text.startswith("-") else int(digits)
    if not -(2**31) <= value < 2**31:
        return None
    return value


def is_integer(text: str) -> bool:
    """True if *text* is a signed 32-bit decimal integer."""
    return _parse_int32(text) is not None


def seconds_to_ticks(text: str) -> int:
    """Convert decimal seconds text to ticks, truncating toward zero.

    Raises ValueError if *text* is not a plain decimal number.
    """
    if not is_decimal(text):
        raise ValueError(f"Not a decimal number: {text!r}")
    with localcontext() as ctx:
        # Wide enough that the product is exact before int() truncates.
        ctx.prec = len(text) + 8
        return int(Decimal(text) * TICKS_PER_SECOND)


def parse_segments(lines: Iterable[str], item_id: uuid.UUID) -> list[Segment]:
    """Parse EDL lines into Segments owned by *item_id*.

    Each line must hold exactly three single-space separated fields:
    start seconds, stop seconds and an integer action code. Lines that do
    not are logged as warnings and skipped; this function never raises for
    malformed content. Output order follows input order.
    """
    segments: list[Segment] = []

    for line in lines:
        parts = line.split(" ")
        if len(parts) != 3:
            logger.warning("EDL line '%s' is not in the correct format", line)
            continue

        start, stop, action = parts
        logger.debug("EDL line parts: start=%r stop=%r action=%r", start, stop, action)

        if not is_decimal(start):
            logger.warning("EDL line '%s' has invalid start time %s", line, start)
            continue
        if not is_decimal(stop):
            logger.warning("EDL line '%s' has invalid stop time %s", line, stop)
            continue
        code = _parse_int32(action)
        if code is None:
            logger.warning("EDL line '%s' has invalid action %s", line, action)
            continue

        segments.append(
            Segment(
                item_id=item_id,
                type=action_to_segment_type(code),
                start_ticks=seconds_to_ticks(start),
                end_ticks=seconds_to_ticks(stop),
            )
        )

    return segments


def parse_edl_text(text: str, item_id: uuid.UUID) -> list[Segment]:
    """Parse a whole EDL document (any line endings)."""
    return parse_segments(text.splitlines(), item_id)
