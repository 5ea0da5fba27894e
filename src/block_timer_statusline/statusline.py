#!/usr/bin/env python3

import argparse
import json
import sys

from datetime import datetime
from typing import Any, Optional, cast

from .renderer import render_status_line_with_config
from .types import BlockMetrics, RenderContext
from .utils.debug import debug_log


def parse_input_data() -> dict[str, Any]:
    """Parse JSON input from stdin and return as dict.

    Returns:
        Dictionary with the host JSON payload
    """
    try:
        input_data = sys.stdin.read()
        data = json.loads(input_data)
    except (json.JSONDecodeError, ValueError):
        return {}
    return cast(dict[str, Any], data) if isinstance(data, dict) else {}


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing "Z".

    Args:
        value: Timestamp string from the payload

    Returns:
        Parsed datetime, or None if missing or malformed
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def extract_block_metrics(data: dict[str, Any]) -> Optional[BlockMetrics]:
    """Extract the current block's timing from the payload.

    Args:
        data: JSON input data

    Returns:
        BlockMetrics if a valid block start time is present, None otherwise
    """
    block = data.get("block")
    if not block or not isinstance(block, dict):
        return None

    start_time = parse_timestamp(block.get("start_time"))
    if start_time is None:
        debug_log(
            f"Ignoring block with invalid start_time: {block.get('start_time')!r}",
            data.get("session_id", ""),
        )
        return None

    return BlockMetrics(start_time=start_time)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="block-timer-statusline",
        description="Status line showing time spent in the current 5hr block",
        epilog="Reads a JSON payload from stdin and outputs the statusline.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Render sample values instead of live block data",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    data = parse_input_data()
    session_id = data.get("session_id", "")

    block_metrics = extract_block_metrics(data)

    debug_log("=== RENDER START ===", session_id)
    debug_log(f"Preview: {args.preview}", session_id)
    debug_log(f"Block metrics: {block_metrics}", session_id)

    context = RenderContext(
        data=data,
        block_metrics=block_metrics,
        is_preview=args.preview,
    )

    output = render_status_line_with_config(context)
    print(output, end="")


if __name__ == "__main__":
    main()
