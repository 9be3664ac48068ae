#!/usr/bin/env python3
"""
panaddr CLI entry point.

This script serves as the entry point for the panaddr command-line interface.
Shell completion is provided by Typer (--install-completion, --show-completion).
"""

from panaddr.cli import app


if __name__ == "__main__":
    app()
