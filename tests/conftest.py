"""Pytest configuration and shared fixtures for beamweld tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from beamweld.domain import BeamRequirement, OffcutPool


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests over real input files")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def small_pool() -> OffcutPool:
    """Pool from the worked examples: 100, 60, 50, 10."""
    return OffcutPool([100, 60, 50, 10])


@pytest.fixture
def sample_requirements() -> list[BeamRequirement]:
    """Two beams, longest first, with one and two weld budgets."""
    return [
        BeamRequirement(size=100, welds=(0, 1)),
        BeamRequirement(size=40, welds=(1,)),
    ]


@pytest.fixture
def write_inputs(tmp_path: Path):
    """Write a requirements file and an offcuts file, return both paths."""

    def _write(requirements: str, offcuts: str) -> tuple[Path, Path]:
        requirements_path = tmp_path / "beams.txt"
        offcuts_path = tmp_path / "offcuts.txt"
        requirements_path.write_text(requirements, encoding="utf-8")
        offcuts_path.write_text(offcuts, encoding="utf-8")
        return requirements_path, offcuts_path

    return _write
