"""Custom pydantic-settings source for policymatch configuration.

YamlLayersSettingsSource loads configuration from layered YAML files.

Configuration layers (in precedence order, highest first):
1. Environment variables (handled by pydantic-settings)
2. Project config: .policymatch/config.yaml in the current directory
3. User config: ~/.config/policymatch/config.yaml (or POLICYMATCH_CONFIG_DIR)

Nested mappings are merged key by key; any other value in a higher
layer replaces the lower one.
"""

import collections.abc as _abc
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import policymatch.constants as constants


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def merge_layers(*layers: _abc.Mapping[str, _typing.Any]) -> dict[str, _typing.Any]:
    """
    Merge config layers given in ascending precedence order.

    Args:
        layers: Parsed YAML mappings, lowest precedence first.

    Returns:
        A new dict; inputs are not modified.
    """
    result: dict[str, _typing.Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, _abc.Mapping):
                result[key] = merge_layers(current, value)
            elif isinstance(value, _abc.Mapping):
                result[key] = merge_layers(value)
            else:
                result[key] = value
    return result


def load_yaml_file(path: _pathlib.Path) -> dict[str, _typing.Any] | None:
    """
    Load a YAML config file.

    Returns:
        Parsed contents, or None if the file is empty.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or is not a mapping at the top level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        return None

    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise ConfigFileError(
            path,
            f"config must be a YAML mapping (dict), got {type_name}",
        )

    return parsed


def get_user_config_path() -> _pathlib.Path:
    """Get path to user config, respecting POLICYMATCH_CONFIG_DIR."""
    config_dir_env = _os.environ.get(constants.ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env) / "config.yaml"
    return _pathlib.Path.home() / ".config" / "policymatch" / "config.yaml"


class YamlLayersSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """Settings source that merges the user and project YAML layers."""

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        project_root: _pathlib.Path | None = None,
        *,
        user_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            project_root: Directory holding .policymatch/config.yaml.
            user_config_path: Override path for user config file (for testing).
        """
        super().__init__(settings_cls)
        self._project_root = project_root
        self._user_config_path = user_config_path
        self._loaded_layers: list[tuple[str, _pathlib.Path]] = []
        self._data = self._load_config_layers()

    def _load_config_layers(self) -> dict[str, _typing.Any]:
        layers: list[dict[str, _typing.Any]] = []

        for name, path in self.get_layer_paths():
            if not path.exists():
                continue
            content = load_yaml_file(path)
            if content:
                layers.append(content)
                self._loaded_layers.append((name, path))

        return merge_layers(*layers)

    def get_layer_paths(self) -> list[tuple[str, _pathlib.Path]]:
        """
        Get all candidate config layers.

        Returns:
            List of (layer_name, path) tuples, lowest precedence first.
        """
        user_path = self._user_config_path or get_user_config_path()
        layers = [("user", user_path)]
        if self._project_root is not None:
            layers.append(("project", self._project_root / constants.PROJECT_CONFIG_PATH))
        return layers

    def get_loaded_layers(self) -> list[tuple[str, _pathlib.Path]]:
        """Layers that existed and had content, lowest precedence first."""
        return list(self._loaded_layers)

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """Get value for a top-level field from the merged layers."""
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return the merged config restricted to known top-level fields."""
        result: dict[str, _typing.Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _is_complex = self.get_field_value(field, field_name)
            if value is not None:
                result[key] = value
        return result
