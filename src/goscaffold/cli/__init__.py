"""Command-line interface for goscaffold."""

from goscaffold.cli.app import app

__all__ = ["app"]
