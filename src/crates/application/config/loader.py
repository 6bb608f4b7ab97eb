"""Reading and validating crate configuration.

Every failure surfaces as ``ConfigError``. Its ``error_type`` says whether
the file was missing, unreadable, malformed JSON or rejected by the schema,
and ``details`` carries one entry per problem for the CLI to print.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from crates.application.config.schema import CrateConfiguration


class ConfigError(Exception):
    """Configuration could not be turned into a ``CrateConfiguration``.

    Attributes:
        message: Summary suitable for a single log line.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Source file, or None for in-memory data.
        details: Line/column for JSON errors; path, message, value and
            error_type per field for validation errors.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message


def load_config(path: Path) -> CrateConfiguration:
    """Load a JSON configuration file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or fails
            schema validation.
    """
    return validate_config(_read_json(path), path=path)


def validate_config(data: Any, path: Path | None = None) -> CrateConfiguration:
    """Validate already-parsed configuration data.

    Serves both files and CLI-merged overrides so that every schema error
    is reported the same way.

    Raises:
        ConfigError: With ``error_type="validation"``.
    """
    try:
        return CrateConfiguration.model_validate(data)
    except ValidationError as e:
        details = [
            {
                "path": field_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigError(_summarize(details), "validation", path, details) from e


def field_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a dotted path.

    >>> field_path(("manifest", 0, "weight"))
    'manifest[0].weight'
    """
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Config file not found: {path}", "file_not_found", path
        ) from None
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from None
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _summarize(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        entry = f"  - {detail['path'] or '(root)'}: {detail['message']}"
        value = detail["value"]
        if value is not None and not isinstance(value, dict):
            entry += f" (got: {value!r})"
        lines.append(entry)
    return "\n".join(lines)
