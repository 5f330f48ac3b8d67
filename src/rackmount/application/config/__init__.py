"""Configuration schema and loading system for enclosure specifications.

Public API:
    - EnclosureConfiguration: Root configuration model
    - RackConfig, SwitchConfig, ChassisConfig, FeaturesConfig, OutputConfig:
      Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides
    - config_to_parameters: Convert configuration to domain parameters
    - ValidationResult, ValidationError, ValidationWarning: Validation results
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from rackmount.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("enclosure.json"))
    ...     print(f"Switches: {config.switch.count}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from rackmount.application.config.adapter import (
    PARAMETER_PATHS,
    config_to_parameters,
    parameter_path,
)
from rackmount.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from rackmount.application.config.merger import merge_config_with_cli
from rackmount.application.config.schema import (
    SUPPORTED_VERSIONS,
    ChassisConfig,
    EnclosureConfiguration,
    FeaturesConfig,
    OutputConfig,
    OutputFormat,
    RackConfig,
    SwitchConfig,
)
from rackmount.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "PARAMETER_PATHS",
    "SUPPORTED_VERSIONS",
    "ChassisConfig",
    "ConfigError",
    "EnclosureConfiguration",
    "FeaturesConfig",
    "OutputConfig",
    "OutputFormat",
    "RackConfig",
    "SwitchConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_parameters",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "parameter_path",
    "validate_config",
]
