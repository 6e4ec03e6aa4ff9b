"""Data contracts for investment projections."""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ContributionFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


PERIODS_PER_YEAR: Dict[ContributionFrequency, int] = {
    ContributionFrequency.WEEKLY: 52,
    ContributionFrequency.BIWEEKLY: 26,
    ContributionFrequency.MONTHLY: 12,
}


class InvestmentParameters(BaseModel):
    """Inputs for a single projection.

    Numeric fields left out of a request default to NaN so that the engine
    rejects them instead of projecting with a made-up value.
    """

    model_config = ConfigDict(extra="forbid")

    contributionAmount: float = Field(
        math.nan,
        description="Amount contributed every period.",
    )
    contributionFrequency: ContributionFrequency = ContributionFrequency.MONTHLY
    nominalAnnualRate: float = Field(
        math.nan,
        description="Expected annual return as a decimal (e.g. 0.07 for 7%).",
    )
    annualInflationRate: float = Field(
        math.nan,
        description="Annual inflation as a decimal (e.g. 0.03 for 3%).",
    )
    years: float = Field(math.nan, description="Investment horizon in years.")

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self.contributionFrequency]


class ProjectionForm(BaseModel):
    """Raw form fields as typed by a user; rates are percentages."""

    model_config = ConfigDict(extra="forbid")

    frequency: ContributionFrequency = ContributionFrequency.MONTHLY
    amount: str = ""
    rate: str = ""
    inflation: str = ""
    years: str = ""


class YearPoint(BaseModel):
    """One row of the chart series. Currency fields are whole units."""

    model_config = ConfigDict(extra="forbid")

    year: int = Field(..., ge=0)
    nominalValue: float
    realValue: float
    totalInvestedSoFar: float
    nominalGrowthPercent: float
    realGrowthPercent: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthlyTotal: float
    yearlyTotal: float
    totalInvested: float
    futureValueNominal: float
    futureValueReal: float
    nominalReturnPercentage: float
    realReturnPercentage: float
    annualizedNominalReturn: float
    annualizedRealReturn: float
    timelineSeries: List[YearPoint]


class SummaryCard(BaseModel):
    label: str
    value: str


class SummaryResponse(BaseModel):
    cards: List[SummaryCard]
    result: ProjectionResult
