import math

import numpy as np
import pytest

from qrisk.risk_scores.errors import InvalidFollowUpYear
from qrisk.risk_scores.registry import available_models, get_model
from qrisk.risk_scores.survival import (
    check_follow_up_year,
    risk_percentage,
    survival_probability,
)

from conftest import make_inputs

SURVIVAL = get_model("2015", "M").coefficients.baseline_survival


def test_zero_linear_predictor_gives_baseline():
    assert survival_probability(SURVIVAL, 0.0, 10) == SURVIVAL[10]
    assert risk_percentage(SURVIVAL, 0.0, 10) == pytest.approx(100 * (1 - SURVIVAL[10]))


def test_risk_increases_with_linear_predictor():
    risks = [risk_percentage(SURVIVAL, a, 10) for a in (-2.0, -1.0, 0.0, 1.0, 2.0)]
    assert risks == sorted(risks)


def test_risk_and_survival_add_up_to_100():
    a = 0.7
    assert risk_percentage(SURVIVAL, a, 7) == pytest.approx(
        100 * (1 - SURVIVAL[7] ** math.exp(a)), rel=1e-12
    )


@pytest.mark.parametrize("year", [1, 10, 15, np.int64(5)])
def test_valid_years(year):
    assert check_follow_up_year(SURVIVAL, year) == int(year)


@pytest.mark.parametrize("year", [0, -1, 16, 100, True, 10.0, "10", None])
def test_invalid_years(year):
    with pytest.raises(InvalidFollowUpYear):
        check_follow_up_year(SURVIVAL, year)


@pytest.mark.parametrize("version, gender", available_models())
@pytest.mark.parametrize("year", [0, 16])
def test_model_rejects_out_of_range_years(version, gender, year):
    with pytest.raises(InvalidFollowUpYear):
        get_model(version, gender).evaluate(make_inputs(follow_up_year=year))


def test_invalid_year_is_a_value_error():
    with pytest.raises(ValueError):
        risk_percentage(SURVIVAL, 0.0, 0)
