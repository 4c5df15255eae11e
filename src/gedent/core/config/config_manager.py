"""
Configuration Manager

Loads, edits and writes the YAML configuration file for gedent.

Layout:

    gedent:
      default_extension: inp
      strict_template_options: false
    parameters:
      method: b3lyp
      charge: 0

Every entry under "parameters" becomes a variable of the render context.
The "gedent" section holds settings of the tool itself.
"""

import logging
import yaml
from pathlib import Path
from typing import Any, Dict
from gedent.core.constants import Constants
from gedent.core.errors import ConfigError

_SCALARS = (str, int, float, bool)


def convert_value(value: str, arg_type: str) -> Any:
    """
    Converts a command-line string into the requested scalar type.

    Args:
        value: Raw string value
        arg_type: One of "string", "float", "int", "bool"
    """
    if arg_type == "string":
        return value
    if arg_type == "bool":
        lowered = value.strip().lower()
        if lowered not in ("true", "false"):
            raise ConfigError(f"Cannot convert {value!r} to bool, use true or false")
        return lowered == "true"
    converters = {"int": int, "float": float}
    if arg_type not in converters:
        raise ConfigError(f"Unsupported type '{arg_type}', expected one of {', '.join(Constants.ARG_TYPES)}")
    try:
        return converters[arg_type](value)
    except ValueError:
        raise ConfigError(f"Cannot convert {value!r} to {arg_type}") from None


def type_name(value: Any) -> str:
    """Returns the arg_type name matching a stored value."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    raise ConfigError(f"Unsupported type {type(value).__name__}")


class ConfigManager:
    def __init__(self, config_path: Path) -> None:
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = self._load_config(self.config_path)
        self._validate()

    @staticmethod
    def _load_config(config_path: Path) -> Dict[str, Any]:
        if not config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML configuration {config_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {config_path} must be a mapping at the top level")
        return data

    def _validate(self) -> None:
        settings = self.config.setdefault("gedent", {}) or {}
        parameters = self.config.setdefault("parameters", {}) or {}
        if not isinstance(settings, dict):
            raise ConfigError("The 'gedent' section must be a mapping")
        if not isinstance(parameters, dict):
            raise ConfigError("The 'parameters' section must be a mapping")
        for key, value in parameters.items():
            if not isinstance(value, _SCALARS):
                raise ConfigError(
                    f"Parameter '{key}' must be a string, number or boolean, got {type(value).__name__}")
        extension = settings.get("default_extension")
        if extension is not None and not isinstance(extension, str):
            raise ConfigError("'gedent.default_extension' must be a string")
        strict = settings.get("strict_template_options")
        if strict is not None and not isinstance(strict, bool):
            raise ConfigError("'gedent.strict_template_options' must be true or false")
        self.config["gedent"] = settings
        self.config["parameters"] = parameters

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.config["parameters"]

    @property
    def default_extension(self) -> str:
        return self.config["gedent"].get("default_extension") or Constants.DEFAULT_EXTENSION

    @property
    def strict_template_options(self) -> bool:
        return bool(self.config["gedent"].get("strict_template_options", False))

    def get_parameters(self) -> Dict[str, Any]:
        """Returns a copy of the parameters, ready to seed a render context."""
        return dict(self.parameters)

    def add(self, key: str, value: str, arg_type: str = "string") -> None:
        if key in self.parameters:
            raise ConfigError(f"Config already contains '{key}'")
        converted = convert_value(value, arg_type)
        self.parameters[key] = converted
        logging.info(f"Added '{key}' = {converted!r} ({arg_type})")

    def set(self, key: str, value: str) -> None:
        """Changes an existing key, keeping the type it already has."""
        if key not in self.parameters:
            raise ConfigError(f"Cannot find '{key}' in config")
        current = self.parameters[key]
        converted = convert_value(value, type_name(current))
        self.parameters[key] = converted
        logging.info(f"Changed '{key}' from {current!r} to {converted!r}")

    def delete(self, key: str) -> None:
        if key not in self.parameters:
            raise ConfigError(f"Failed to remove '{key}', not found")
        del self.parameters[key]
        logging.info(f"Removed '{key}'")

    def dump(self) -> str:
        return yaml.safe_dump(self.config, sort_keys=False, default_flow_style=False)

    def write(self) -> None:
        self.config_path.write_text(self.dump(), encoding="utf-8")
        logging.info(f"Config written to {self.config_path}")
