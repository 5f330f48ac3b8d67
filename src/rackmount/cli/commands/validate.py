"""``rackmount validate``: check a configuration file without generating geometry."""

from pathlib import Path
from typing import Annotated, Any

import typer

from rackmount.application.config import (
    ConfigError,
    EnclosureConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)

_LOAD_FAILURE_HEADLINES = {
    "file_not_found": "File not found",
    "permission_denied": "Permission denied",
    "file_read_error": "Could not read file",
    "json_parse": "Invalid JSON syntax",
    "validation": "Schema violations",
}


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Enclosure configuration file (JSON) to check"),
    ],
) -> None:
    """Check an enclosure configuration file.

    Reports schema violations, structural errors (unsupported rack width,
    a lip that closes the switch opening, tolerance eating the wall) and
    advisories (a single switch taller than the requested height, wire
    channels breaking through a side wall, faces with no room for vents).

    Exit codes:
        0 - clean
        1 - errors, the file cannot be used
        2 - usable, but with warnings

    Example:
        rackmount validate enclosure.json
    """
    typer.echo(f"Checking {config_file}")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _report_load_failure(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(config, result)
    raise typer.Exit(code=result.exit_code)


def _report_load_failure(error: ConfigError) -> None:
    headline = _LOAD_FAILURE_HEADLINES.get(error.error_type)
    if headline is None:
        typer.echo(f"  {error.message}", err=True)
    else:
        typer.echo(f"{headline}: {error.path}", err=True)
        for detail in error.details:
            typer.echo(f"  {_describe_detail(detail)}", err=True)
    typer.echo("Validation failed.", err=True)


def _describe_detail(detail: dict[str, Any]) -> str:
    if "line" in detail:
        return f"line {detail['line']}, column {detail.get('column', '?')}: {detail['message']}"
    text = f"{detail.get('path', '?')}: {detail['message']}"
    if detail.get("value") is not None:
        text += f" (value: {detail['value']!r})"
    return text


def _report(config: EnclosureConfiguration, result: ValidationResult) -> None:
    for error in result.errors:
        line = f"  error    {error.path}: {error.message}"
        if error.value is not None:
            line += f" (value: {error.value!r})"
        typer.echo(line, err=True)

    if result.warnings:
        typer.echo("Warnings:")
    for warning in result.warnings:
        typer.echo(f"  warning  {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"           Suggestion: {warning.suggestion}")

    if not result.is_valid:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
        return

    rack = config.rack
    switch = config.switch
    typer.echo(
        f"Enclosure: {switch.count} x {switch.width:g} x {switch.height:g} mm switch(es) "
        f"in a {rack.width:g} mm rack, {rack.height:g}U requested"
    )
    if result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
