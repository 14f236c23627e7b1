"""CLI commands for OptionTracker.

This package provides the command-line interface that renders
the analytics engine's results in the terminal.
"""

from optiontracker.cli.main import cli, main

__all__ = ["cli", "main"]
