"""CLI commands for hersheytext."""

from hersheytext.cli.commands.fonts import fonts
from hersheytext.cli.commands.render import render

__all__ = ["render", "fonts"]
