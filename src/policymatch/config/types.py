"""Configuration type definitions for policymatch settings.

Each section is a Pydantic model nested within the main Settings class:
- LoggingConfig: level
- OutputConfig: format, show_diagnostics

All types use `extra="allow"` to preserve unknown fields, so typos in
config files can be reported with `collect_all_extra_fields()` instead
of being silently dropped.
"""

import typing as _typing

import pydantic as _pydantic

import policymatch.constants as constants

LogLevel = _typing.Literal["debug", "info", "warning", "error"]
OutputFormat = _typing.Literal["text", "json"]


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Return fields that were provided but not in the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(
        self,
        prefix: str = "",
    ) -> dict[str, _typing.Any]:
        """
        Recursively collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"output.fromat": "json"}
        """
        result: dict[str, _typing.Any] = {}

        for key, value in self.get_extra_fields().items():
            path = f"{prefix}.{key}" if prefix else key
            result[path] = value

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, ConfigBase):
                child_prefix = f"{prefix}.{field_name}" if prefix else field_name
                result.update(value.collect_all_extra_fields(child_prefix))

        return result


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    YAML section: logging.*
    """

    level: LogLevel = constants.DEFAULT_LOG_LEVEL
    """Log level for the CLI. Match diagnostics are logged at warning."""


# =============================================================================
# Output Settings
# =============================================================================


class OutputConfig(ConfigBase):
    """
    CLI output settings.

    YAML section: output.*
    """

    format: OutputFormat = "text"
    """Output format for check and run commands."""

    show_diagnostics: bool = True
    """Print diagnostics explaining a negative result."""
