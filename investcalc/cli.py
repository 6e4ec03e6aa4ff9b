"""
Terminal interface for the investment calculator.

Takes the same raw values as the web form (rates in percent) and prints the
headline figures followed by the year-by-year projection.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from investcalc.core.formatting import format_currency, format_percentage, summary_cards
from investcalc.core.forms import parameters_from_form
from investcalc.core.projection import ProjectionValidationError, compute_projection
from investcalc.schemas.projection import (
    ContributionFrequency,
    ProjectionForm,
    ProjectionResult,
)

W = 78  # report width (characters)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="investcalc-cli",
        description="Project nominal and inflation-adjusted growth of regular contributions.",
    )
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in ContributionFrequency],
        default=ContributionFrequency.MONTHLY.value,
        help="How often a contribution is made (default: monthly)",
    )
    parser.add_argument("--amount", default="", help="Amount per period, e.g. 500")
    parser.add_argument("--rate", default="", help="Expected annual return in percent, e.g. 7")
    parser.add_argument("--inflation", default="", help="Annual inflation in percent, e.g. 3")
    parser.add_argument("--years", default="", help="Number of years to invest")
    return parser


def _row(label: str, value: str, lw: int = 38) -> str:
    return f"  {label:<{lw}}{value}"


def render_report(result: ProjectionResult) -> str:
    lines: List[str] = ["=" * W, "  Investment Calculator", "=" * W]
    lines.extend(_row(card.label, card.value) for card in summary_cards(result))
    lines.append(_row("Future Value (Nominal)", format_currency(result.futureValueNominal)))
    lines.append(_row("Future Value (Real)", format_currency(result.futureValueReal)))
    lines.append("-" * W)
    lines.append(
        f"  {'Year':>4}  {'Nominal':>12}  {'Real':>12}  {'Invested':>12}"
        f"  {'Nominal %':>10}  {'Real %':>10}"
    )
    for point in result.timelineSeries:
        lines.append(
            f"  {point.year:>4}  {format_currency(point.nominalValue):>12}"
            f"  {format_currency(point.realValue):>12}"
            f"  {format_currency(point.totalInvestedSoFar):>12}"
            f"  {format_percentage(point.nominalGrowthPercent):>10}"
            f"  {format_percentage(point.realGrowthPercent):>10}"
        )
    lines.append("=" * W)
    return "\n".join(lines)


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the projection and print it. Returns an exit code."""
    args = build_parser().parse_args(argv)
    form = ProjectionForm(
        frequency=args.frequency,
        amount=args.amount,
        rate=args.rate,
        inflation=args.inflation,
        years=args.years,
    )

    try:
        result = compute_projection(parameters_from_form(form))
    except ProjectionValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
