"""Value objects for the beam welding domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ReportStyle(str, Enum):
    """Output styles for allocation reports.

    Attributes:
        VERBOSE: Markdown report with waste and material efficiency stats.
        TERSE: One line per attempt, no statistics.
    """

    VERBOSE = "verbose"
    TERSE = "terse"


@dataclass(frozen=True)
class BeamRequirement:
    """A required beam length and the weld budgets to attempt for it.

    Attributes:
        size: Target beam length.
        welds: Maximum weld counts to try, evaluated in order.
    """

    size: int
    welds: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable, store as tuple
        object.__setattr__(self, "welds", tuple(self.welds))
        if self.size <= 0:
            raise ValueError("Beam size must be positive")
        if any(w < 0 for w in self.welds):
            raise ValueError("Weld budgets must be non-negative")


@dataclass(frozen=True)
class BeamPlan:
    """A successful allocation of offcuts to a single beam.

    Attributes:
        target: Beam length that was requested.
        total: Sum of the chosen offcut lengths (never less than target).
        welds: Number of joints, one less than the number of pieces.
        used_offcuts: Chosen offcut lengths in selection order.
    """

    target: int
    total: int
    welds: int
    used_offcuts: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.used_offcuts:
            raise ValueError("A beam plan needs at least one offcut")
        if self.total < self.target:
            raise ValueError("Plan total must reach the target length")

    @property
    def waste(self) -> int:
        """Material beyond the target length."""
        return self.total - self.target

    @property
    def waste_percentage(self) -> float:
        """Waste as a percentage of the assembled length."""
        if self.total == 0:
            return 0.0
        return self.waste / self.total * 100

    @property
    def piece_count(self) -> int:
        return len(self.used_offcuts)
