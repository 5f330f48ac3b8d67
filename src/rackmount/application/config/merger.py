"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from pathlib import Path
from typing import Any

from rackmount.application.config.loader import load_config_from_dict
from rackmount.application.config.schema import EnclosureConfiguration

# CLI keyword -> (config section, field)
_OVERRIDE_TARGETS: dict[str, tuple[str, str]] = {
    "rack_width": ("rack", "width"),
    "rack_height": ("rack", "height"),
    "half_height_holes": ("rack", "half_height_holes"),
    "switch_width": ("switch", "width"),
    "switch_depth": ("switch", "depth"),
    "switch_height": ("switch", "height"),
    "switch_count": ("switch", "count"),
    "case_thickness": ("switch", "case_thickness"),
    "tolerance": ("switch", "tolerance"),
    "front_wire_holes": ("features", "front_wire_holes"),
    "wire_diameter": ("features", "wire_diameter"),
    "air_holes": ("features", "air_holes"),
    "zip_tie_hole_width": ("features", "zip_tie_hole_width"),
    "print_orientation": ("output", "print_orientation"),
    "output_format": ("output", "format"),
    "output_path": ("output", "path"),
}


def merge_config_with_cli(
    config: EnclosureConfiguration,
    **overrides: Any,
) -> EnclosureConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base EnclosureConfiguration to merge with
        **overrides: Keyword overrides named after the CLI options, for
            example ``switch_count=3`` or ``output_format="json"``. None
            values are ignored.

    Returns:
        A new, re-validated EnclosureConfiguration with merged values

    Raises:
        TypeError: If an override name is not recognised.
        ConfigError: If an override value fails schema validation.

    Example:
        >>> merged = merge_config_with_cli(config, rack_height=2.0)
        >>> merged.rack.height
        2.0
    """
    unknown = sorted(set(overrides) - set(_OVERRIDE_TARGETS))
    if unknown:
        raise TypeError(f"Unknown configuration override(s): {', '.join(unknown)}")

    data = config.model_dump()
    for name, value in overrides.items():
        if value is None:
            continue
        section, field = _OVERRIDE_TARGETS[name]
        if isinstance(value, Path):
            value = str(value)
        data[section][field] = value

    return load_config_from_dict(data)
