"""Tests for requirement and offcut input loading."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from beamweld.domain import BeamRequirement
from beamweld.infrastructure.loaders import (
    MAX_LENGTH,
    InputError,
    load_beam_requirements,
    load_inputs,
    load_inputs_async,
    load_offcuts,
    parse_beam_requirements,
    parse_offcuts,
)


class TestParseBeamRequirements:
    """Tests for requirement line parsing."""

    def test_size_then_welds(self) -> None:
        assert parse_beam_requirements("100 0 1 2") == [
            BeamRequirement(size=100, welds=(0, 1, 2))
        ]

    def test_size_only(self) -> None:
        assert parse_beam_requirements("250") == [BeamRequirement(size=250, welds=())]

    def test_comments_and_blank_lines_ignored(self) -> None:
        text = "# beams for job 12\n\n   \n100 1\n  # indented comment\n"
        assert parse_beam_requirements(text) == [BeamRequirement(size=100, welds=(1,))]

    def test_sorted_longest_first(self) -> None:
        text = "100 0\n300 1\n200 2\n"
        assert [r.size for r in parse_beam_requirements(text)] == [300, 200, 100]

    def test_equal_sizes_keep_file_order(self) -> None:
        text = "100 0\n100 1\n"
        assert [r.welds for r in parse_beam_requirements(text)] == [(0,), (1,)]

    def test_non_numeric_tokens_dropped(self) -> None:
        assert parse_beam_requirements("100 x 1 two 2") == [
            BeamRequirement(size=100, welds=(1, 2))
        ]

    def test_leading_bad_token_shifts_size(self) -> None:
        assert parse_beam_requirements("beam 100 1") == [BeamRequirement(size=100, welds=(1,))]

    def test_negative_and_decimal_tokens_dropped(self) -> None:
        assert parse_beam_requirements("100 -1 1.5 2") == [BeamRequirement(size=100, welds=(2,))]

    def test_plus_sign_accepted(self) -> None:
        assert parse_beam_requirements("+100 +1") == [BeamRequirement(size=100, welds=(1,))]

    def test_line_without_numbers_skipped(self) -> None:
        assert parse_beam_requirements("abc def\n50 0") == [BeamRequirement(size=50, welds=(0,))]

    def test_zero_size_line_skipped(self) -> None:
        assert parse_beam_requirements("0 1 2\n50 0") == [BeamRequirement(size=50, welds=(0,))]

    def test_zero_weld_budget_kept(self) -> None:
        assert parse_beam_requirements("100 0 0") == [BeamRequirement(size=100, welds=(0, 0))]

    def test_oversized_weld_token_dropped(self) -> None:
        text = "100 " + "9" * 5000 + " 1"
        assert parse_beam_requirements(text) == [BeamRequirement(size=100, welds=(1,))]


class TestParseOffcuts:
    """Tests for offcut parsing."""

    def test_any_whitespace_layout(self) -> None:
        pool = parse_offcuts("10 60\n\n50\t100  \n")
        assert pool.lengths == [100, 60, 50, 10]

    def test_bad_tokens_dropped(self) -> None:
        assert parse_offcuts("10 abc -5 20 3.5").lengths == [20, 10]

    def test_zero_length_offcut_kept(self) -> None:
        assert parse_offcuts("0 10").lengths == [10, 0]

    def test_oversized_token_dropped(self) -> None:
        assert parse_offcuts("10 " + "9" * 5000 + " 20").lengths == [20, 10]

    def test_values_beyond_unsigned_range_dropped(self) -> None:
        text = f"{MAX_LENGTH} {MAX_LENGTH + 1} 10"
        assert parse_offcuts(text).lengths == [MAX_LENGTH, 10]

    def test_empty_text(self) -> None:
        assert len(parse_offcuts("")) == 0


class TestFileLoading:
    """Tests for reading input files."""

    def test_load_beam_requirements(self, tmp_path: Path) -> None:
        path = tmp_path / "beams.txt"
        path.write_text("100 0\n200 1\n", encoding="utf-8")
        assert [r.size for r in load_beam_requirements(path)] == [200, 100]

    def test_load_offcuts(self, tmp_path: Path) -> None:
        path = tmp_path / "offcuts.txt"
        path.write_text("5 15 10", encoding="utf-8")
        assert load_offcuts(path).lengths == [15, 10, 5]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputError) as exc_info:
            load_offcuts(tmp_path / "missing.txt")
        assert exc_info.value.error_type == "file_not_found"
        assert "missing.txt" in str(exc_info.value)

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(InputError) as exc_info:
            load_beam_requirements(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "offcuts.txt"
        path.write_bytes(b"10 \xff\xfe 20")
        with pytest.raises(InputError) as exc_info:
            load_offcuts(path)
        assert exc_info.value.error_type == "decode_error"


class TestLoadInputs:
    """Tests for concurrent loading of both inputs."""

    def test_loads_both(self, write_inputs) -> None:
        requirements_path, offcuts_path = write_inputs("100 0 1\n40 1\n", "10 100 60 50")
        requirements, pool = load_inputs(requirements_path, offcuts_path)
        assert [r.size for r in requirements] == [100, 40]
        assert pool.lengths == [100, 60, 50, 10]

    def test_async_entry_point(self, write_inputs) -> None:
        requirements_path, offcuts_path = write_inputs("70 2", "30 20")
        requirements, pool = asyncio.run(load_inputs_async(requirements_path, offcuts_path))
        assert requirements == [BeamRequirement(size=70, welds=(2,))]
        assert pool.lengths == [30, 20]

    def test_either_failure_aborts(self, write_inputs, tmp_path: Path) -> None:
        requirements_path, _ = write_inputs("100 0", "10")
        with pytest.raises(InputError):
            load_inputs(requirements_path, tmp_path / "nope.txt")

    def test_accepts_string_paths(self, write_inputs) -> None:
        requirements_path, offcuts_path = write_inputs("100 0", "100")
        requirements, pool = load_inputs(str(requirements_path), str(offcuts_path))
        assert len(requirements) == 1
        assert len(pool) == 1
