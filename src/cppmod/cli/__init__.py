"""Command-line interface for cppmod."""

from cppmod.cli.app import app

__all__ = ["app"]
