"""YAML loading and parsing for run parameters."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .configuration import Parameters
from .errors import ConfigLoadError, ConfigValidationError


def _mapping_from_yaml(text: str, source: str | None = None) -> dict:
    """Parse YAML text whose root is a mapping; an empty document is {}."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", source) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", source
        )
    return data


def load_parameters(path: str | Path) -> Parameters:
    """Load run parameters from a YAML file.

    An empty file yields the default parameters.

    Raises:
        ConfigLoadError: If the file is missing, unreadable or not a YAML mapping.
        ConfigValidationError: If the parameters fail validation.
    """
    path = Path(path)
    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise ConfigLoadError(f"{reason}: {path}", str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e
    return parse_parameters_data(_mapping_from_yaml(text, str(path)))


def parse_parameters_from_string(yaml_string: str) -> Parameters:
    """Parse run parameters from a YAML string.

    Raises:
        ConfigLoadError: If the YAML cannot be parsed.
        ConfigValidationError: If the parameters fail validation.
    """
    return parse_parameters_data(_mapping_from_yaml(yaml_string))


def parse_parameters_data(data: dict) -> Parameters:
    """Validate raw data into Parameters.

    The parameters may sit at the root or under a ``parameters`` key.

    Raises:
        ConfigValidationError: If the data fails validation.
    """
    if "parameters" in data:
        data = data["parameters"] or {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Schema validation failed with 1 error(s)",
                [
                    {
                        "loc": "parameters",
                        "msg": "Expected a mapping",
                        "type": "dict_type",
                    }
                ],
            )

    try:
        return Parameters.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e
