"""CLI commands for StockQuest.

This package provides the command-line interface for StockQuest,
including the interactive trading session and market/catalog views.
"""

from stockquest.cli.main import cli, main

__all__ = ["cli", "main"]
