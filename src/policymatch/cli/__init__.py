"""
CLI module for policymatch.

Provides the command-line interface using Click.
"""

from policymatch.cli.main import cli, main

__all__ = ["main", "cli"]
