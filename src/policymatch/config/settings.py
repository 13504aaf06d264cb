"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with POLICYMATCH_ prefix
3. Layered YAML config files:
   - Project config: .policymatch/config.yaml
   - User config: ~/.config/policymatch/config.yaml

Nested config uses double underscore delimiter:
  POLICYMATCH_LOGGING__LEVEL=debug
  POLICYMATCH_OUTPUT__FORMAT=json
"""

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import policymatch.config.sources as sources
import policymatch.config.types as types
import policymatch.constants as constants


class Settings(_pydantic_settings.BaseSettings):
    """
    policymatch configuration settings.

    All settings can be overridden via environment variables with the
    POLICYMATCH_ prefix. For nested config, use double underscore:
    POLICYMATCH_OUTPUT__SHOW_DIAGNOSTICS=false
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",  # POLICYMATCH_CONFIG_DIR is not a setting
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) - highest
        2. env_settings (POLICYMATCH_* env vars)
        3. yaml layers (project, then user)
        4. (defaults via Field definitions) - lowest
        """
        return (
            init_settings,
            env_settings,
            sources.YamlLayersSettingsSource(settings_cls, _pathlib.Path.cwd()),
        )

    @classmethod
    def construct_isolated(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from constructor arguments and environment only.

        YAML layers are skipped. Useful for test isolation.
        """
        return _IsolatedSettings(**kwargs)

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    output: types.OutputConfig = _pydantic.Field(default_factory=types.OutputConfig)
    """CLI output settings."""

    @property
    def log_level(self) -> int:
        """Numeric logging level (alias to logging.level)."""
        return _logging.getLevelName(self.logging.level.upper())  # type: ignore[no-any-return]

    def to_dict(self) -> dict[str, _typing.Any]:
        """Effective settings as a plain dict (for config show)."""
        return self.model_dump(mode="json")


class _IsolatedSettings(Settings):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],  # noqa: ARG003
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings)
