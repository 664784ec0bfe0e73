"""Infrastructure layer - input files and report formatting."""

from .formatters import AllocationReportFormatter
from .loaders import (
    InputError,
    load_beam_requirements,
    load_inputs,
    load_inputs_async,
    load_offcuts,
    parse_beam_requirements,
    parse_offcuts,
)

__all__ = [
    "AllocationReportFormatter",
    "InputError",
    "load_beam_requirements",
    "load_inputs",
    "load_inputs_async",
    "load_offcuts",
    "parse_beam_requirements",
    "parse_offcuts",
]
