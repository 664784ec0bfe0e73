"""Domain layer - offcut pool, beam values and the greedy allocator."""

from .pool import OffcutPool, PoolDraw
from .services import OffcutAllocator, find_combinations
from .value_objects import BeamPlan, BeamRequirement, ReportStyle

__all__ = [
    "BeamPlan",
    "BeamRequirement",
    "OffcutAllocator",
    "OffcutPool",
    "PoolDraw",
    "ReportStyle",
    "find_combinations",
]
