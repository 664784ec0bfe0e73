"""Input file loaders for beam requirements and offcut inventories.

Both formats are plain text. Parsing is lenient per token (anything that is
not an unsigned integer is dropped) and strict per file (a file that cannot
be read raises :class:`InputError` and aborts the run).

The two files have no dependency on each other, so :func:`load_inputs`
reads them concurrently on worker threads.
"""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path

from beamweld.domain import BeamRequirement, OffcutPool

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# Largest length a 64-bit unsigned counter can hold
MAX_LENGTH = 2**64 - 1


class InputError(Exception):
    """Exception raised when an input file cannot be read.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, decode_error)
        path: Path to the input file
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(
            message=f"Input file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    except PermissionError:
        raise InputError(
            message=f"Permission denied reading input file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except UnicodeDecodeError as e:
        raise InputError(
            message=f"Input file is not valid UTF-8 text: {path}: {e.reason}",
            error_type="decode_error",
            path=path,
        )
    except OSError as e:
        raise InputError(
            message=f"Error reading input file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def _parse_numbers(text: str) -> tuple[list[int], int]:
    """Return the unsigned integers in ``text`` and the count of dropped tokens.

    Values above ``MAX_LENGTH`` count as dropped, as do tokens too long for
    ``int()`` to convert.
    """
    numbers: list[int] = []
    dropped = 0
    for token in text.split():
        if not _UNSIGNED_INT.fullmatch(token):
            dropped += 1
            continue
        try:
            value = int(token)
        except ValueError:
            dropped += 1
            continue
        if value > MAX_LENGTH:
            dropped += 1
            continue
        numbers.append(value)
    return numbers, dropped


def parse_beam_requirements(text: str) -> list[BeamRequirement]:
    """Parse requirement lines into requirements sorted longest first.

    Each non-comment line holds a beam size followed by the weld budgets to
    try for it. Blank lines and lines starting with ``#`` are ignored.

    Example:
        >>> [r.size for r in parse_beam_requirements("100 0 1\\n# note\\n250 2")]
        [250, 100]
    """
    requirements: list[BeamRequirement] = []
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        numbers, dropped = _parse_numbers(line)
        if dropped:
            logger.debug("Line %d: dropped %d non-numeric tokens", line_no, dropped)
        if not numbers:
            continue

        size, *welds = numbers
        if size == 0:
            logger.debug("Line %d: skipping zero-length beam", line_no)
            continue
        requirements.append(BeamRequirement(size=size, welds=tuple(welds)))

    # Longest beams first so later, shorter beams can use the leftovers
    requirements.sort(key=lambda r: r.size, reverse=True)
    return requirements


def parse_offcuts(text: str) -> OffcutPool:
    """Parse whitespace-separated offcut lengths into a pool."""
    numbers, dropped = _parse_numbers(text)
    if dropped:
        logger.debug("Dropped %d non-numeric offcut tokens", dropped)
    return OffcutPool(numbers)


def load_beam_requirements(path: Path) -> list[BeamRequirement]:
    """Load beam requirements from a file.

    Raises:
        InputError: If the file cannot be read.
    """
    requirements = parse_beam_requirements(_read_text(path))
    logger.info("Loaded %d beam requirements from %s", len(requirements), path)
    return requirements


def load_offcuts(path: Path) -> OffcutPool:
    """Load an offcut pool from a file.

    Raises:
        InputError: If the file cannot be read.
    """
    pool = parse_offcuts(_read_text(path))
    logger.info("Loaded %d offcuts from %s", len(pool), path)
    return pool


async def load_inputs_async(
    requirements_path: Path,
    offcuts_path: Path,
) -> tuple[list[BeamRequirement], OffcutPool]:
    """Read both input files concurrently.

    Raises:
        InputError: If either file cannot be read.
    """
    requirements, pool = await asyncio.gather(
        asyncio.to_thread(load_beam_requirements, requirements_path),
        asyncio.to_thread(load_offcuts, offcuts_path),
    )
    return requirements, pool


def load_inputs(
    requirements_path: Path,
    offcuts_path: Path,
) -> tuple[list[BeamRequirement], OffcutPool]:
    """Synchronous wrapper for :func:`load_inputs_async`."""
    return asyncio.run(load_inputs_async(Path(requirements_path), Path(offcuts_path)))
