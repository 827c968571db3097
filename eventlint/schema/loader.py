"""YAML loading and parsing for process definitions."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import ProcessModel

logger = logging.getLogger(__name__)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _require_mapping(data, str(path))


def parse_model(path: str | Path) -> ProcessModel:
    """Load and parse a YAML file into a ProcessModel.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    model = parse_model_data(data)
    logger.debug("Loaded %d process(es) from %s", len(model.processes), path)
    return model


def parse_model_from_string(yaml_string: str) -> ProcessModel:
    """Parse a YAML string into a ProcessModel.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    return parse_model_data(_require_mapping(data))


def parse_model_data(data: dict) -> ProcessModel:
    """Validate raw mapping data into a ProcessModel.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return ProcessModel.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e


def _require_mapping(data: object, path: str | None = None) -> dict:
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )

    return data
