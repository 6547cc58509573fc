"""Configuration schema and loading system for wardrobe suggestions.

Public API:
    - WardrobeConfiguration: Root configuration model
    - WardrobeConfig: Wardrobe dimensions and type
    - StandardsConfig: Industry standards overrides
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_input / config_to_standards: Convert to domain objects
    - merge_config_with_cli: Apply CLI overrides

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wardrobe.json"))
    ...     print(f"Width: {config.wardrobe.width}{config.wardrobe.unit.value}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_input,
    config_to_standards,
    standards_from_schema,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from wardrobes.application.config.merger import merge_config_with_cli
from wardrobes.application.config.schema import (
    SUPPORTED_VERSIONS,
    StandardsConfig,
    WardrobeConfig,
    WardrobeConfiguration,
)
from wardrobes.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "StandardsConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeConfig",
    "WardrobeConfiguration",
    "config_to_input",
    "config_to_standards",
    "standards_from_schema",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
