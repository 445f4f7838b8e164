"""Command-line interface for hersheytext."""

from hersheytext.cli.main import cli

__all__ = ["cli"]
