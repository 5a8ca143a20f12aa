#!/usr/bin/env python3
"""
Video Converter Pro - Main Entrypoint
=====================================
Runs the Textual TUI.
"""

from videoconv_tui import main


if __name__ == "__main__":
    raise SystemExit(main())
