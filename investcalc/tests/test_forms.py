from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from investcalc.core.forms import parameters_from_form, parse_float
from investcalc.core.projection import INVALID_INPUT_MESSAGE, ProjectionValidationError, compute_projection
from investcalc.schemas.projection import ContributionFrequency, ProjectionForm


@pytest.mark.parametrize(
    "text, expected",
    [
        ("500", 500.0),
        ("  7.5", 7.5),
        ("12.5%", 12.5),
        ("-3", -3.0),
        (".25", 0.25),
        ("1e3", 1000.0),
        ("2e", 2.0),
        ("30 years", 30.0),
    ],
)
def test_parse_float_reads_numeric_prefix(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "$500", "."])
def test_parse_float_without_number_is_nan(text):
    assert math.isnan(parse_float(text))


def test_parse_float_accepts_infinity():
    assert parse_float("Infinity") == math.inf
    assert parse_float("-Infinity") == -math.inf


def test_form_rates_are_percentages():
    form = ProjectionForm(frequency="weekly", amount="50", rate="8", inflation="2.5", years="20")
    params = parameters_from_form(form)

    assert params.contributionFrequency is ContributionFrequency.WEEKLY
    assert params.contributionAmount == 50.0
    assert math.isclose(params.nominalAnnualRate, 0.08)
    assert math.isclose(params.annualInflationRate, 0.025)
    assert params.years == 20.0


def test_blank_rate_reports_missing_input():
    form = ProjectionForm(amount="1000", rate="", inflation="3", years="10")
    with pytest.raises(ProjectionValidationError) as excinfo:
        compute_projection(parameters_from_form(form))
    assert excinfo.value.message == INVALID_INPUT_MESSAGE


def test_form_defaults_to_monthly():
    assert ProjectionForm().frequency is ContributionFrequency.MONTHLY


def test_unknown_frequency_is_rejected():
    with pytest.raises(ValidationError):
        ProjectionForm(frequency="daily", amount="1", rate="1", inflation="1", years="1")
