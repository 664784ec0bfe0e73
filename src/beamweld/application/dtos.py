"""Data Transfer Objects for allocation runs.

These DTOs carry the results of a run from the application layer to the
infrastructure formatters.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from beamweld.domain import BeamPlan, BeamRequirement


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one weld budget for one beam.

    Attributes:
        max_welds: Weld budget that was attempted.
        plan: The plan found, or None when the pool could not satisfy it.
    """

    max_welds: int
    plan: BeamPlan | None = None

    @property
    def solved(self) -> bool:
        return self.plan is not None


@dataclass
class BeamResult:
    """All attempts made for a single beam requirement.

    Attributes:
        index: Zero-based position of the beam in processing order.
        requirement: The requirement that was processed.
        attempts: One result per declared weld budget, in declaration order.
    """

    index: int
    requirement: BeamRequirement
    attempts: list[AttemptResult] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        """True when at least one weld budget produced a plan."""
        return any(attempt.solved for attempt in self.attempts)


@dataclass
class AllocationOutput:
    """Complete results of an allocation run.

    Attributes:
        beams: Per-beam results in processing order.
        initial_offcut_count: Number of offcuts before allocation.
        initial_material: Combined offcut length before allocation.
        remaining_offcuts: Offcuts left after allocation, longest first.
    """

    beams: list[BeamResult]
    initial_offcut_count: int
    initial_material: int
    remaining_offcuts: list[int] = field(default_factory=list)

    @property
    def total_beams(self) -> int:
        return len(self.beams)

    @property
    def solved_count(self) -> int:
        return sum(1 for beam in self.beams if beam.solved)

    @property
    def remaining_material(self) -> int:
        return sum(self.remaining_offcuts)

    @property
    def total_waste(self) -> int:
        """Waste summed over every successful attempt."""
        return sum(
            attempt.plan.waste
            for beam in self.beams
            for attempt in beam.attempts
            if attempt.plan is not None
        )

    @property
    def material_efficiency(self) -> float:
        """Share of the initial material consumed by plans, in percent."""
        if self.initial_material == 0:
            return 0.0
        consumed = self.initial_material - self.remaining_material
        return consumed / self.initial_material * 100
