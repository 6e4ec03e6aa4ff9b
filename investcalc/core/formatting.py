"""Display formatting for projection results (currency and percent strings)."""

from __future__ import annotations

import math
from typing import List

from investcalc.schemas.projection import ProjectionResult, SummaryCard


def format_currency(value: float) -> str:
    """Format as $X.XX, abbreviating thousands to K and millions to M."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    if value >= 1000:
        return f"${value / 1000:.2f}K"
    return f"${value:.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.2f}%" if math.isfinite(value) else "0.00%"


def summary_cards(result: ProjectionResult) -> List[SummaryCard]:
    """The headline figures shown above the charts, in display order."""
    return [
        SummaryCard(label="Monthly Investment", value=format_currency(result.monthlyTotal)),
        SummaryCard(label="Yearly Investment", value=format_currency(result.yearlyTotal)),
        SummaryCard(label="Total Amount Invested", value=format_currency(result.totalInvested)),
        SummaryCard(
            label="Total Growth (Nominal)",
            value=format_percentage(result.nominalReturnPercentage),
        ),
        SummaryCard(
            label="Total Growth (Real)",
            value=format_percentage(result.realReturnPercentage),
        ),
        SummaryCard(
            label="Annualized Return (Nominal)",
            value=format_percentage(result.annualizedNominalReturn),
        ),
        SummaryCard(
            label="Annualized Return (Real)",
            value=format_percentage(result.annualizedRealReturn),
        ),
    ]
