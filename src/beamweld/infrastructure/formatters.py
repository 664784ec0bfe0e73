"""Output formatters for allocation runs."""

from __future__ import annotations

from beamweld.application.dtos import AllocationOutput, AttemptResult, BeamResult
from beamweld.domain import BeamPlan, ReportStyle


def _welds_word(count: int) -> str:
    return "weld" if count == 1 else "welds"


class AllocationReportFormatter:
    """Formats an allocation run for display.

    Two styles are supported:
    - verbose: markdown report with input summary, per-attempt details,
      waste figures and a closing material efficiency summary.
    - terse: one line per attempt, no statistics.
    """

    def __init__(self, style: ReportStyle = ReportStyle.VERBOSE, units: str = "mm") -> None:
        """Initialize formatter.

        Args:
            style: Report style to render.
            units: Unit suffix printed after lengths.
        """
        self._style = ReportStyle(style)
        self._units = units

    @property
    def style(self) -> ReportStyle:
        return self._style

    def format(self, output: AllocationOutput) -> str:
        if self._style is ReportStyle.TERSE:
            return self._format_terse(output)
        return self._format_verbose(output)

    # -------------------------------------------------------------------------
    # Verbose
    # -------------------------------------------------------------------------

    def _format_verbose(self, output: AllocationOutput) -> str:
        u = self._units
        lines = [
            "# Beam Welding Solutions",
            "",
            "## Input Summary",
            "",
            f"- **Total beams required**: {output.total_beams}",
            f"- **Available offcuts**: {output.initial_offcut_count}",
            f"- **Total material**: {output.initial_material} {u}",
            "",
        ]

        for beam in output.beams:
            lines.extend(self._format_verbose_beam(beam))
            if beam.index < output.total_beams - 1:
                lines.extend(["---", ""])

        lines.extend(
            [
                "",
                "## Summary",
                "",
                f"- **Beams solved**: {output.solved_count}/{output.total_beams}",
                f"- **Remaining offcuts**: {len(output.remaining_offcuts)}",
                f"- **Total waste**: {output.total_waste} {u}",
                f"- **Remaining material**: {output.remaining_material} {u}",
                f"- **Material efficiency**: {output.material_efficiency:.1f}%",
            ]
        )
        return "\n".join(lines)

    def _format_verbose_beam(self, beam: BeamResult) -> list[str]:
        lines = [f"## Beam {beam.index + 1} - {beam.requirement.size} {self._units}", ""]
        for attempt in beam.attempts:
            if attempt.plan is None:
                lines.append(
                    f"❌ **Max {attempt.max_welds} {_welds_word(attempt.max_welds)}** "
                    "- No solution found"
                )
                lines.append("")
            else:
                lines.extend(self._format_verbose_plan(attempt, attempt.plan))
        return lines

    def _format_verbose_plan(self, attempt: AttemptResult, plan: BeamPlan) -> list[str]:
        u = self._units
        pieces = " + ".join(f"{piece} {u}" for piece in plan.used_offcuts)
        return [
            f"✅ **Max {attempt.max_welds} {_welds_word(attempt.max_welds)}** - Solution found",
            f"- **Actual length**: {plan.total} {u}",
            f"- **Welds used**: {plan.welds}",
            f"- **Waste**: {plan.waste} {u} ({plan.waste_percentage:.1f}%)",
            f"- **Offcuts used**: {pieces} = {plan.total} {u}",
            "",
        ]

    # -------------------------------------------------------------------------
    # Terse
    # -------------------------------------------------------------------------

    def _format_terse(self, output: AllocationOutput) -> str:
        u = self._units
        lines: list[str] = []
        for beam in output.beams:
            size = beam.requirement.size
            lines.append(f"{size} {u}")
            for attempt in beam.attempts:
                word = _welds_word(attempt.max_welds)
                if attempt.plan is None:
                    lines.append(f"{size} {u} with {attempt.max_welds} {word} - not found")
                else:
                    pieces = " + ".join(str(piece) for piece in attempt.plan.used_offcuts)
                    lines.append(
                        f"{size} {u} with {attempt.max_welds} {word}: "
                        f"{pieces} = {attempt.plan.total}"
                    )
            if beam.index < output.total_beams - 1:
                lines.append("")
        return "\n".join(lines)
