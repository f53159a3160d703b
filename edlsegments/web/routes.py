"""JSON routes the host queries for segments."""

import asyncio
import logging
import uuid

from flask import Blueprint, current_app, jsonify, request

from edlsegments.models import SegmentRequest
from edlsegments.parser import parse_edl_text
from edlsegments.provider import EdlSegmentProvider

logger = logging.getLogger(__name__)

bp = Blueprint("api", __name__, url_prefix="/api")


def _provider() -> EdlSegmentProvider:
    return current_app.extensions["edl_provider"]


@bp.route("/health")
def health():
    return jsonify({"status": "ok", "provider": _provider().name})


@bp.route("/items/<item_id>/segments")
def item_segments(item_id: str):
    try:
        parsed_id = uuid.UUID(item_id)
    except ValueError:
        logger.debug("Ignoring malformed item id %r", item_id)
        return jsonify({"item_id": item_id, "segments": []})

    try:
        segments = asyncio.run(
            _provider().get_media_segments(SegmentRequest(item_id=parsed_id))
        )
    except OSError as e:
        logger.error("Reading EDL for item %s failed: %s", item_id, e)
        return jsonify({"error": f"Could not read EDL file: {e}"}), 500

    return jsonify({
        "item_id": str(parsed_id),
        "segments": [s.to_dict() for s in segments],
    })


@bp.route("/parse", methods=["POST"])
def parse():
    if request.is_json:
        body = request.get_json(silent=True) or {}
        text = body.get("text")
        raw_item_id = body.get("item_id")
    else:
        text = request.get_data(as_text=True)
        raw_item_id = request.args.get("item_id")

    if not isinstance(text, str):
        return jsonify({"error": "No EDL text provided"}), 400

    try:
        item_id = uuid.UUID(raw_item_id) if raw_item_id else uuid.uuid4()
    except (TypeError, ValueError):
        return jsonify({"error": f"Invalid item_id: {raw_item_id!r}"}), 400

    segments = parse_edl_text(text, item_id)
    return jsonify({
        "item_id": str(item_id),
        "segments": [s.to_dict() for s in segments],
    })
