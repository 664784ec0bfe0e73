"""Application commands (use cases) for offcut allocation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from beamweld.domain import BeamRequirement, OffcutAllocator, OffcutPool

from .dtos import AllocationOutput, AttemptResult, BeamResult

logger = logging.getLogger(__name__)


class AllocateBeamsCommand:
    """Command to allocate offcuts to every beam requirement.

    Beams are processed in the order given and each weld budget is tried
    against the same, progressively depleted pool. Nothing is undone once a
    plan has consumed its pieces.
    """

    def __init__(self, allocator: OffcutAllocator | None = None) -> None:
        self.allocator = allocator or OffcutAllocator()

    def execute(
        self,
        requirements: Sequence[BeamRequirement],
        pool: OffcutPool,
    ) -> AllocationOutput:
        """Execute the allocation run.

        Args:
            requirements: Beam requirements in processing order. The loaders
                return them sorted by size, longest first.
            pool: Live offcut pool, mutated in place.

        Returns:
            AllocationOutput with per-attempt results and run totals.
        """
        initial_count = len(pool)
        initial_material = pool.total_length
        logger.info(
            "Allocating %d beams from %d offcuts (%d total)",
            len(requirements),
            initial_count,
            initial_material,
        )

        beams: list[BeamResult] = []
        for index, requirement in enumerate(requirements):
            result = BeamResult(index=index, requirement=requirement)
            for max_welds in requirement.welds:
                plan = self.allocator.allocate(pool, requirement, max_welds)
                result.attempts.append(AttemptResult(max_welds=max_welds, plan=plan))
            beams.append(result)

        output = AllocationOutput(
            beams=beams,
            initial_offcut_count=initial_count,
            initial_material=initial_material,
            remaining_offcuts=pool.lengths,
        )
        logger.info(
            "Solved %d/%d beams, %d offcuts remaining",
            output.solved_count,
            output.total_beams,
            len(output.remaining_offcuts),
        )
        return output

    def execute_files(self, requirements_path: Path, offcuts_path: Path) -> AllocationOutput:
        """Load both input files, then run the allocation.

        Raises:
            InputError: If either file cannot be read.
        """
        from beamweld.infrastructure.loaders import load_inputs

        requirements, pool = load_inputs(requirements_path, offcuts_path)
        return self.execute(requirements, pool)
