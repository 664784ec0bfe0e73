"""Configuration file loader with error reporting.

Loads a JSON configuration file and validates it against
:class:`BeamweldConfiguration`. File system errors, JSON syntax errors and
schema violations all surface as :class:`ConfigError`.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from beamweld.application.config.schema import BeamweldConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to ``{"path", "message", "value"}`` dicts."""
    return [
        {
            "path": ".".join(map(str, err["loc"])),
            "message": err["msg"],
            "value": err.get("input"),
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail["value"] is not None:
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(
    data: Any, path: Path | None = None
) -> BeamweldConfiguration:
    """Validate already-decoded configuration data.

    ``path`` is only used to label errors when the data came from a file.

    Raises:
        ConfigError: With error_type "validation" if the data is not a JSON
            object or does not match the schema.
    """
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Configuration must be a JSON object, got {type(data).__name__}",
            error_type="validation",
            path=path,
        )
    try:
        return BeamweldConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> BeamweldConfiguration:
    """Load and validate a configuration from a JSON file.

    Raises:
        ConfigError: error_type is one of "file_not_found",
            "permission_denied", "file_read_error", "json_parse" or
            "validation".
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return load_config_from_dict(data, path=path)
