"""Conversion of raw form input into projection parameters."""

from __future__ import annotations

import math
import re

from investcalc.schemas.projection import InvestmentParameters, ProjectionForm

# Longest numeric prefix, the way a browser's parseFloat reads it.
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(text: str) -> float:
    """Lenient number parsing: "12.5%" -> 12.5, "" or "abc" -> NaN."""
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def parameters_from_form(form: ProjectionForm) -> InvestmentParameters:
    """Rates on the form are percentages; the engine expects fractions."""
    return InvestmentParameters(
        contributionAmount=parse_float(form.amount),
        contributionFrequency=form.frequency,
        nominalAnnualRate=parse_float(form.rate) / 100,
        annualInflationRate=parse_float(form.inflation) / 100,
        years=parse_float(form.years),
    )
