"""Configuration merging for CLI overrides.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from beamweld.application.config.schema import (
    BeamweldConfiguration,
    LoggingConfig,
    ReportConfig,
)
from beamweld.domain.value_objects import ReportStyle


def merge_config_with_cli(
    config: BeamweldConfiguration,
    *,
    style: ReportStyle | str | None = None,
    units: str | None = None,
    log_level: str | None = None,
) -> BeamweldConfiguration:
    """Return a new configuration with CLI overrides applied.

    Example:
        >>> merged = merge_config_with_cli(BeamweldConfiguration(), style="terse")
        >>> merged.report.style
        <ReportStyle.TERSE: 'terse'>
    """
    report_data = config.report.model_dump()
    if style is not None:
        report_data["style"] = style
    if units is not None:
        report_data["units"] = units

    logging_data = config.logging.model_dump()
    if log_level is not None:
        logging_data["level"] = log_level

    return BeamweldConfiguration(
        schema_version=config.schema_version,
        report=ReportConfig.model_validate(report_data),
        logging=LoggingConfig.model_validate(logging_data),
    )
