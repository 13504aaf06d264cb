"""
Configuration module for policymatch.

Uses pydantic-settings for environment variable and YAML loading.
"""

from policymatch.config.settings import Settings
from policymatch.config.sources import ConfigFileError

__all__ = ["ConfigFileError", "Settings"]
