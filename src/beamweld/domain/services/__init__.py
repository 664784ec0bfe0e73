"""Domain services for offcut allocation."""

from .allocator import OffcutAllocator, find_combinations

__all__ = [
    "OffcutAllocator",
    "find_combinations",
]
