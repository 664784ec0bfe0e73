"""Pydantic models for beamweld configuration files.

A configuration file is optional. Every section has defaults, so the
smallest valid file is ``{"schema_version": "1.0"}``.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from beamweld.domain.value_objects import ReportStyle

# Version 1.0: report style and logging level
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ReportConfig(BaseModel):
    """Report rendering configuration.

    Attributes:
        style: Report style, verbose (markdown with stats) or terse.
        units: Unit suffix printed after every length.
    """

    model_config = ConfigDict(extra="forbid")

    style: ReportStyle = ReportStyle.VERBOSE
    units: str = Field(default="mm", min_length=1, max_length=8)


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v


class BeamweldConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        report: Report rendering configuration
        logging: Diagnostic logging configuration

    Example:
        >>> config = BeamweldConfiguration(schema_version="1.0")
        >>> config.report.style
        <ReportStyle.VERBOSE: 'verbose'>
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
