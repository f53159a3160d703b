"""Thin CLI entry point: parses EDL files and serves the web API."""

import argparse
import asyncio
import json
import logging
import sys
import uuid
from dataclasses import replace
from pathlib import Path

from edlsegments.config import AppConfig, load_config
from edlsegments.fsutil import LocalFileSystem
from edlsegments.library import load_library
from edlsegments.models import Segment, SegmentRequest
from edlsegments.parser import parse_segments
from edlsegments.provider import EdlSegmentProvider


def _dump(item_id: uuid.UUID, segments: list[Segment]) -> None:
    print(json.dumps({
        "item_id": str(item_id),
        "segments": [s.to_dict() for s in segments],
    }, indent=2))


def _load_app_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else AppConfig()
    if args.library:
        config.library = args.library
    return config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="edlsegments",
        description="EDL Segments: turn EDL sidecar files into media segments.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    parse_cmd = sub.add_parser("parse", help="Parse an EDL file")
    parse_cmd.add_argument("edl", type=Path, help="EDL file")
    parse_cmd.add_argument("--item-id", type=uuid.UUID, help="Owning item id (random if omitted)")

    seg = sub.add_parser("segments", help="Look up segments for a library item")
    seg.add_argument("item_id", type=uuid.UUID, help="Item id")
    seg.add_argument("--config", "-c", type=Path, help="Path to a JSON config file")
    seg.add_argument("--library", "-l", type=Path, help="Path to a JSON library file")
    seg.add_argument("--marker-guard", action="store_true", help="Skip and mark processed items")

    serve = sub.add_parser("serve", help="Launch the web API")
    serve.add_argument("--config", "-c", type=Path, help="Path to a JSON config file")
    serve.add_argument("--library", "-l", type=Path, help="Path to a JSON library file")
    serve.add_argument("--port", type=int, default=8322, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "parse":
            item_id = args.item_id or uuid.uuid4()
            lines = LocalFileSystem().read_all_lines(args.edl)
            _dump(item_id, parse_segments(lines, item_id))
            return

        config = _load_app_config(args)

        if args.command == "serve":
            from edlsegments.web import create_app
            app = create_app(config)
            print(f"EDL Segments API: http://{args.host}:{args.port}")
            app.run(host=args.host, port=args.port, debug=False)
            return

        if config.library is None:
            print("Error: provide --library or a config with 'library'.", file=sys.stderr)
            sys.exit(1)
        if args.marker_guard:
            config.provider = replace(config.provider, use_marker_guard=True)
        provider = EdlSegmentProvider(load_library(config.library), config=config.provider)
        segments = asyncio.run(provider.get_media_segments(SegmentRequest(item_id=args.item_id)))
        _dump(args.item_id, segments)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
