"""Typer CLI for rack-mount enclosure generation."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from rackmount.application import GenerateEnclosureCommand, SolveDimensionsCommand
from rackmount.application.config import (
    ConfigError,
    EnclosureConfiguration,
    config_to_parameters,
    load_config,
    merge_config_with_cli,
)
from rackmount.cli.commands import validate_command
from rackmount.domain import ConfigurationError, EnclosureParameters
from rackmount.domain.cutouts import plan_mounting_holes, should_emit
from rackmount.infrastructure import (
    DimensionReportFormatter,
    MountingHoleReportFormatter,
    WarningFormatter,
    dimensions_to_dict,
)
from rackmount.infrastructure.exporters import ExporterRegistry

ConfigFile = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
RackWidthOption = Annotated[
    float | None,
    typer.Option("--rack-width", help="Rack panel width in mm: 152.4 (6\") or 254 (10\")"),
]
RackHeightOption = Annotated[
    float | None,
    typer.Option("--rack-height", "-u", help="Requested height in rack units"),
]
HalfHeightOption = Annotated[
    bool | None,
    typer.Option(
        "--half-height-holes/--whole-units",
        help="Allow a fractional height with partial edge holes",
    ),
]
SwitchWidthOption = Annotated[
    float | None, typer.Option("--switch-width", help="Switch width in mm")
]
SwitchDepthOption = Annotated[
    float | None, typer.Option("--switch-depth", help="Switch depth in mm")
]
SwitchHeightOption = Annotated[
    float | None, typer.Option("--switch-height", help="Switch height in mm")
]
SwitchCountOption = Annotated[
    int | None, typer.Option("--switch-count", "-n", help="Number of stacked switches")
]
CaseThicknessOption = Annotated[
    float | None, typer.Option("--case-thickness", help="Wall and divider thickness in mm")
]
ToleranceOption = Annotated[
    float | None, typer.Option("--tolerance", help="Clearance around each switch in mm")
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log solver and generator decisions")
]


app = typer.Typer(
    name="rackmount",
    help="Generate 3D-printable rack-mount enclosures for network switches.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _resolve_config(config_file: Path | None, **overrides) -> EnclosureConfiguration:
    """Load the configuration file (or defaults) and apply CLI overrides."""
    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            config = EnclosureConfiguration(schema_version="1.0")
        return merge_config_with_cli(config, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _resolve_parameters(config_file: Path | None, **overrides) -> EnclosureParameters:
    return config_to_parameters(_resolve_config(config_file, **overrides))


@app.command()
def generate(
    config_file: ConfigFile = None,
    rack_width: RackWidthOption = None,
    rack_height: RackHeightOption = None,
    half_height_holes: HalfHeightOption = None,
    switch_width: SwitchWidthOption = None,
    switch_depth: SwitchDepthOption = None,
    switch_height: SwitchHeightOption = None,
    switch_count: SwitchCountOption = None,
    case_thickness: CaseThicknessOption = None,
    tolerance: ToleranceOption = None,
    wire_holes: Annotated[
        bool | None,
        typer.Option("--wire-holes/--no-wire-holes", help="Cut wire pass-through holes"),
    ] = None,
    wire_diameter: Annotated[
        float | None, typer.Option("--wire-diameter", help="Wire hole diameter in mm")
    ] = None,
    air_holes: Annotated[
        bool | None,
        typer.Option("--air-holes/--no-air-holes", help="Cut honeycomb ventilation"),
    ] = None,
    zip_tie_width: Annotated[
        float | None, typer.Option("--zip-tie-width", help="Zip-tie slot width in mm")
    ] = None,
    print_orientation: Annotated[
        bool | None,
        typer.Option(
            "--print-orientation/--installed",
            help="Lay the enclosure flat for printing or stand it up as installed",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: scad, json, stl, dxf"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (required for stl)"),
    ] = None,
    stl_part: Annotated[
        str | None,
        typer.Option("--stl-part", help="STL preview part: body or cutters"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate an enclosure and export it.

    Parameters come from the configuration file, overridden by any CLI
    option given. Text formats go to stdout unless --output is set.

    Examples:
        rackmount generate --switch-count 3 --rack-height 2 > rack.scad
        rackmount generate --config enclosure.json --format stl -o body.stl
        rackmount generate --config enclosure.json --installed --format json
    """
    _configure_logging(verbose)
    if output_format is not None and not ExporterRegistry.is_registered(output_format):
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(
            f"Error: Unknown format '{output_format}'. Available formats: {available}",
            err=True,
        )
        raise typer.Exit(code=1)

    config = _resolve_config(
        config_file,
        rack_width=rack_width,
        rack_height=rack_height,
        half_height_holes=half_height_holes,
        switch_width=switch_width,
        switch_depth=switch_depth,
        switch_height=switch_height,
        switch_count=switch_count,
        case_thickness=case_thickness,
        tolerance=tolerance,
        front_wire_holes=wire_holes,
        wire_diameter=wire_diameter,
        air_holes=air_holes,
        zip_tie_hole_width=zip_tie_width,
        print_orientation=print_orientation,
        output_format=output_format,
        output_path=output_file,
    )

    result = GenerateEnclosureCommand().execute(config_to_parameters(config))
    if not result.is_valid:
        for message in result.error_messages():
            typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)

    model = result.model
    warnings = WarningFormatter().format(result.warnings)
    if warnings:
        typer.echo(warnings, err=True)

    fmt = config.output.format
    path = Path(config.output.path) if config.output.path else None
    options = {"part": stl_part or config.output.stl_part} if fmt == "stl" else {}
    try:
        exporter = ExporterRegistry.create(fmt, **options)
        if path is None:
            if fmt == "stl":
                typer.echo("Error: --output is required for stl format", err=True)
                raise typer.Exit(code=1)
            typer.echo(exporter.export_string(model), nl=False)
            return
        exporter.export(model, path)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    dims = model.dims
    typer.echo(
        f"Wrote {fmt.upper()} to {path} "
        f"({dims.adjusted_rack_units:.3f}U, {len(model.mounting_holes)} mounting holes, "
        f"{len(model.vent_cells)} vent holes)"
    )


@app.command()
def solve(
    config_file: ConfigFile = None,
    rack_width: RackWidthOption = None,
    rack_height: RackHeightOption = None,
    half_height_holes: HalfHeightOption = None,
    switch_width: SwitchWidthOption = None,
    switch_depth: SwitchDepthOption = None,
    switch_height: SwitchHeightOption = None,
    switch_count: SwitchCountOption = None,
    case_thickness: CaseThicknessOption = None,
    tolerance: ToleranceOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a report")] = False,
    verbose: VerboseOption = False,
) -> None:
    """Show the solved dimensions without building geometry."""
    _configure_logging(verbose)
    params = _resolve_parameters(
        config_file,
        rack_width=rack_width,
        rack_height=rack_height,
        half_height_holes=half_height_holes,
        switch_width=switch_width,
        switch_depth=switch_depth,
        switch_height=switch_height,
        switch_count=switch_count,
        case_thickness=case_thickness,
        tolerance=tolerance,
    )
    try:
        dims = SolveDimensionsCommand().execute(params)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(dimensions_to_dict(dims), indent=2))
    else:
        typer.echo(DimensionReportFormatter().format(dims, params))


@app.command()
def holes(
    config_file: ConfigFile = None,
    rack_width: RackWidthOption = None,
    rack_height: RackHeightOption = None,
    half_height_holes: HalfHeightOption = None,
    switch_height: SwitchHeightOption = None,
    switch_count: SwitchCountOption = None,
    case_thickness: CaseThicknessOption = None,
    show_all: Annotated[
        bool, typer.Option("--all", help="Include candidates that are not cut")
    ] = False,
) -> None:
    """List the rack mounting holes on the front panel."""
    params = _resolve_parameters(
        config_file,
        rack_width=rack_width,
        rack_height=rack_height,
        half_height_holes=half_height_holes,
        switch_height=switch_height,
        switch_count=switch_count,
        case_thickness=case_thickness,
    )
    try:
        dims = SolveDimensionsCommand().execute(params)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    candidates = plan_mounting_holes(
        params.rack_standard, dims.adjusted_rack_units, dims.total_height_mm
    )
    if not show_all:
        candidates = [h for h in candidates if should_emit(h, params.half_height_holes)]
    typer.echo(MountingHoleReportFormatter(include_hidden=show_all).format(candidates))


if __name__ == "__main__":
    app()
