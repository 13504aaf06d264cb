"""
Shared constants for policymatch.

This module provides a single source of truth for values used across
the engine, configuration and CLI.
"""

ALTERNATION_SEPARATOR = "|"
"""Separator between alternatives of a string pattern."""

ENV_PREFIX = "POLICYMATCH_"
"""Prefix of environment variables read by Settings."""

ENV_CONFIG_DIR = "POLICYMATCH_CONFIG_DIR"
"""Environment variable overriding the user config directory."""

PROJECT_CONFIG_PATH = ".policymatch/config.yaml"
"""Project config file, relative to the current directory."""

DEFAULT_LOG_LEVEL = "warning"
"""Default log level for the CLI."""
