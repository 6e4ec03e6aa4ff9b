"""
Compound-growth projection of periodic contributions.

Conventions:
  - Contributions form an ordinary annuity: each payment lands at the END of
    its period, so the final payment earns nothing.
  - Real values use the Fisher-adjusted rate (1 + nominal) / (1 + inflation) - 1,
    compounded with the same per-period convention as the nominal path.
  - Timeline currency is rounded half-up to whole units; headline totals are
    returned unrounded and left to the display layer.
"""

from __future__ import annotations

import logging
import math
from typing import List

from investcalc.schemas.projection import (
    InvestmentParameters,
    ProjectionResult,
    YearPoint,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please fill in all fields with valid numbers"
INFLATION_TOO_HIGH_MESSAGE = "Inflation rate must be less than 100%"
RETURN_NOT_POSITIVE_MESSAGE = "Expected return rate must be greater than 0%"


class ProjectionValidationError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_parameters(params: InvestmentParameters) -> None:
    """Raise ProjectionValidationError for the first failing rule."""
    numbers = (
        params.contributionAmount,
        params.nominalAnnualRate,
        params.annualInflationRate,
        params.years,
    )
    if not all(math.isfinite(value) for value in numbers):
        raise ProjectionValidationError(INVALID_INPUT_MESSAGE)
    if params.annualInflationRate >= 1:
        raise ProjectionValidationError(INFLATION_TOO_HIGH_MESSAGE)
    if params.nominalAnnualRate <= 0:
        raise ProjectionValidationError(RETURN_NOT_POSITIVE_MESSAGE)


def _power(base: float, exponent: float) -> float:
    """base ** exponent, giving inf/nan where math.pow would raise."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf
    except ValueError:
        # zero to a negative power, or a negative base with a fractional exponent
        if base == 0:
            return math.inf
        return math.nan


def real_rate(nominal_rate: float, inflation_rate: float) -> float:
    if 1 + inflation_rate == 0:
        return math.inf
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def future_value(amount: float, rate: float, periods: float) -> float:
    """Future value of `periods` end-of-period payments of `amount` at `rate`."""
    if rate == 0:
        return amount * periods
    return amount * (_power(1 + rate, periods) - 1) / rate


def return_percentage(final_value: float, invested: float) -> float:
    if invested == 0:
        return 0.0
    return (final_value - invested) / invested * 100


def annualized_return(final_value: float, invested: float, years: float) -> float:
    """CAGR of `invested` growing into `final_value`, in percent.

    Undefined results (no horizon, nothing invested, negative ratio with a
    fractional root, overflow) are reported as 0.
    """
    if years == 0 or invested == 0:
        return 0.0
    growth = (_power(final_value / invested, 1 / years) - 1) * 100
    return growth if math.isfinite(growth) else 0.0


def round_currency(value: float) -> float:
    # half-up, so 2.5 -> 3 and -2.5 -> -2
    # at 2**52 and beyond every float is already whole
    if not math.isfinite(value) or abs(value) >= 2**52:
        return value
    return float(math.floor(value + 0.5))


def build_timeline(
    amount: float,
    nominal_rate: float,
    inflation_adjusted_rate: float,
    periods_per_year: int,
    years: float,
) -> List[YearPoint]:
    """One point per whole year from 0 through floor(years)."""
    nominal_per_period = nominal_rate / periods_per_year
    real_per_period = inflation_adjusted_rate / periods_per_year

    series: List[YearPoint] = []
    for year in range(math.floor(years) + 1):
        periods = year * periods_per_year
        if periods == 0:
            nominal = real = 0.0
        else:
            nominal = future_value(amount, nominal_per_period, periods)
            real = future_value(amount, real_per_period, periods)
        invested = amount * periods

        series.append(
            YearPoint(
                year=year,
                nominalValue=round_currency(nominal),
                realValue=round_currency(real),
                totalInvestedSoFar=round_currency(invested),
                nominalGrowthPercent=return_percentage(nominal, invested),
                realGrowthPercent=return_percentage(real, invested),
            )
        )
    return series


def compute_projection(params: InvestmentParameters) -> ProjectionResult:
    """Validate `params` and project nominal and real growth over the horizon."""
    validate_parameters(params)

    amount = params.contributionAmount
    years = params.years
    periods_per_year = params.periods_per_year

    adjusted_rate = real_rate(params.nominalAnnualRate, params.annualInflationRate)
    total_periods = periods_per_year * years

    future_value_nominal = future_value(
        amount, params.nominalAnnualRate / periods_per_year, total_periods
    )
    future_value_real = future_value(amount, adjusted_rate / periods_per_year, total_periods)

    monthly_total = amount * (periods_per_year / 12)
    yearly_total = amount * periods_per_year
    total_invested = yearly_total * years

    logger.debug(
        "projection frequency=%s periods=%s nominal=%.4f real=%.6f",
        params.contributionFrequency.value,
        total_periods,
        params.nominalAnnualRate,
        adjusted_rate,
    )

    return ProjectionResult(
        monthlyTotal=monthly_total,
        yearlyTotal=yearly_total,
        totalInvested=total_invested,
        futureValueNominal=future_value_nominal,
        futureValueReal=future_value_real,
        nominalReturnPercentage=return_percentage(future_value_nominal, total_invested),
        realReturnPercentage=return_percentage(future_value_real, total_invested),
        annualizedNominalReturn=annualized_return(future_value_nominal, total_invested, years),
        annualizedRealReturn=annualized_return(future_value_real, total_invested, years),
        timelineSeries=build_timeline(
            amount,
            params.nominalAnnualRate,
            adjusted_rate,
            periods_per_year,
            years,
        ),
    )


__all__ = [
    "INVALID_INPUT_MESSAGE",
    "INFLATION_TOO_HIGH_MESSAGE",
    "RETURN_NOT_POSITIVE_MESSAGE",
    "ProjectionValidationError",
    "validate_parameters",
    "real_rate",
    "future_value",
    "return_percentage",
    "annualized_return",
    "round_currency",
    "build_timeline",
    "compute_projection",
]
