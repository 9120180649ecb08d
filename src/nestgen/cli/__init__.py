"""Command line interface for nestgen."""

from nestgen.cli.app import app

__all__ = ["app"]
