"""Application layer - use cases and orchestration."""

from .commands import AllocateBeamsCommand
from .dtos import AllocationOutput, AttemptResult, BeamResult

__all__ = [
    "AllocateBeamsCommand",
    "AllocationOutput",
    "AttemptResult",
    "BeamResult",
]
