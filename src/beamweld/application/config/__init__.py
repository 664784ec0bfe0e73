"""Configuration schema and loading for beamweld runs.

Public API:
    - BeamweldConfiguration: Root configuration model
    - ReportConfig: Report rendering options
    - LoggingConfig: Diagnostic logging options
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - ConfigError: Exception for configuration errors
"""

from beamweld.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from beamweld.application.config.merger import merge_config_with_cli
from beamweld.application.config.schema import (
    SUPPORTED_VERSIONS,
    BeamweldConfiguration,
    LoggingConfig,
    ReportConfig,
)

__all__ = [
    "BeamweldConfiguration",
    "ConfigError",
    "LoggingConfig",
    "ReportConfig",
    "SUPPORTED_VERSIONS",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
