"""Loading enclosure configurations from JSON files and plain dictionaries.

Every failure, whether the file is missing or unreadable, the JSON is
malformed or a field breaks the schema, is reported as a single
``ConfigError`` whose ``error_type`` tells the caller which case it was.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rackmount.application.config.schema import EnclosureConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """An enclosure configuration could not be loaded.

    Attributes:
        message: Human-readable summary, also the ``str()`` of the error.
        error_type: One of ``file_not_found``, ``permission_denied``,
            ``file_read_error``, ``json_parse`` or ``validation``.
        path: Configuration file the error refers to, if any.
        details: Per-problem records. Schema errors carry ``path``,
            ``message``, ``value`` and ``error_type``; JSON errors carry
            ``line``, ``column`` and ``message``.
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
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _dotted_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``section.field`` (lists as ``field[i]``)."""
    text = ""
    for segment in loc:
        if isinstance(segment, int):
            text += f"[{segment}]"
        else:
            text = f"{text}.{segment}" if text else str(segment)
    return text


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _dotted_path(problem["loc"]),
            "message": problem["msg"],
            "value": problem.get("input"),
            "error_type": problem["type"],
        }
        for problem in error.errors()
    ]


def _summarize(problems: list[dict[str, Any]]) -> str:
    lines = [f"Invalid enclosure configuration ({len(problems)} problem(s)):"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        value = problem.get("value")
        # Whole sections echo back as dicts; those add nothing to the message.
        if value is not None and not isinstance(value, dict):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> EnclosureConfiguration:
    try:
        return EnclosureConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        raise ConfigError(
            message=_summarize(problems),
            error_type="validation",
            path=path,
            details=problems,
        ) from e


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Cannot read config file {path}: permission denied",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", error_type="file_read_error", path=path
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Config file {path} is not valid JSON: {e.msg} "
            f"(line {e.lineno}, column {e.colno})",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> EnclosureConfiguration:
    """Read, parse and validate an enclosure configuration file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not JSON, or
            does not match the schema.
    """
    config = _validate(_read_json(path), path)
    logger.debug(
        f"Loaded {path}: {config.switch.count} switch(es) in a "
        f"{config.rack.width:g} mm rack"
    )
    return config


def load_config_from_dict(data: dict[str, Any]) -> EnclosureConfiguration:
    """Validate an in-memory configuration, as sent to the API or merged from the CLI.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
