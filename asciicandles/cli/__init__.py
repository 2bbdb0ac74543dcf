"""CLI commands for asciicandles.

This package provides the command-line interface for drawing candle
charts from short candle specifications.
"""

from asciicandles.cli.main import cli, main

__all__ = ["cli", "main"]
