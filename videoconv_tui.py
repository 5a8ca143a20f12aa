#!/usr/bin/env python3
"""
Video Converter Pro TUI launcher.

Usage:
    python main.py
    python videoconv_tui.py --source /path/to/movie.mkv --target mp4
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from videoconv.app.config import DEFAULT_SERVICE_URL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="videoconv-tui", description="Video Converter Pro Textual TUI")
    parser.add_argument("--source", type=Path, help="Optional source video to accept on startup")
    parser.add_argument("--target", help="Optional output format to preselect (e.g. mp4)")
    parser.add_argument(
        "--service-url",
        default=DEFAULT_SERVICE_URL,
        help=f"Conversion service endpoint (default: {DEFAULT_SERVICE_URL})",
    )
    parser.add_argument("--output-dir", type=Path, help="Directory for converted files (default: ~/Downloads)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        from textual.logging import TextualHandler
        from videoconv.tui.app import LaunchOptions, VideoConverterTUI
    except ImportError:
        print("error: Textual is not installed. Run `pip install textual requests`.", file=sys.stderr)
        return 1

    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    options = LaunchOptions(
        source=args.source.resolve() if args.source else None,
        target=args.target,
        service_url=args.service_url,
        output_dir=args.output_dir.expanduser().resolve() if args.output_dir else None,
    )
    app = VideoConverterTUI(options=options)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
