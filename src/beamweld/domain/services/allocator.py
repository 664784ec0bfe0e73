"""Greedy offcut allocation for a single beam.

Each step first looks for one piece that can finish the beam on its own and
takes the shortest such piece to keep waste low. When no piece is long
enough, it takes the longest piece that still fits and moves on. A beam may
use at most ``max_welds + 1`` pieces.

The allocator never backtracks. A failed attempt hands every drawn piece
back to the pool, so the only side effect of a call is the removal of the
pieces of a successful plan.
"""

from __future__ import annotations

import logging

from ..pool import OffcutPool
from ..value_objects import BeamPlan, BeamRequirement

logger = logging.getLogger(__name__)


def find_combinations(
    pool: OffcutPool,
    target_length: int,
    max_welds: int,
) -> BeamPlan | None:
    """Assemble ``target_length`` from pool pieces using at most ``max_welds`` welds.

    Args:
        pool: Live offcut pool. Mutated only when a plan is found.
        target_length: Required beam length.
        max_welds: Maximum number of joints, so ``max_welds + 1`` pieces.

    Returns:
        The BeamPlan when the pieces reach the target, otherwise None.

    Raises:
        ValueError: If target_length is not positive or max_welds is negative.

    Example:
        >>> pool = OffcutPool([60, 50, 10])
        >>> find_combinations(pool, 100, 1).used_offcuts
        (60, 50)
        >>> pool.lengths
        [10]
    """
    if target_length <= 0:
        raise ValueError("Target length must be positive")
    if max_welds < 0:
        raise ValueError("Max welds must be non-negative")

    max_pieces = max_welds + 1

    with pool.draw() as draw:
        for _ in range(max_pieces):
            remaining = max(target_length - draw.total, 0)

            # One piece finishes the beam: take the shortest that does
            index = pool.smallest_at_least(remaining)
            if index is not None:
                piece = draw.take(index)
                logger.debug(
                    "Finishing %d with %d (remaining %d)", target_length, piece, remaining
                )
                draw.commit()
                used = tuple(draw.taken)
                return BeamPlan(
                    target=target_length,
                    total=draw.total,
                    welds=len(used) - 1,
                    used_offcuts=used,
                )

            # Nothing long enough: extend with the longest piece that fits
            index = pool.largest_at_most(remaining)
            if index is None:
                logger.debug("Pool exhausted while building %d", target_length)
                break
            piece = draw.take(index)
            logger.debug(
                "Extending %d with %d (remaining %d)", target_length, piece, remaining
            )

    return None


class OffcutAllocator:
    """Service wrapper around :func:`find_combinations` with run logging."""

    def allocate(
        self,
        pool: OffcutPool,
        requirement: BeamRequirement,
        max_welds: int,
    ) -> BeamPlan | None:
        """Try one weld budget of a requirement against the live pool."""
        logger.debug(
            "Allocating %d with max %d welds from %d offcuts",
            requirement.size,
            max_welds,
            len(pool),
        )
        plan = find_combinations(pool, requirement.size, max_welds)
        if plan is None:
            logger.info("No plan for %d with max %d welds", requirement.size, max_welds)
        else:
            logger.info(
                "Planned %d from %s (waste %d)",
                requirement.size,
                list(plan.used_offcuts),
                plan.waste,
            )
        return plan
