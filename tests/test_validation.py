import logging
import math

import numpy as np
import pytest

from conftest import make_inputs
from qrisk.risk_scores.errors import DomainError, UnsupportedRiskFactor
from qrisk.risk_scores.registry import get_model


@pytest.mark.parametrize(
    "values",
    [
        dict(age=0),
        dict(age=-40),
        dict(bmi=0),
        dict(bmi=-1.5),
        dict(age=math.nan),
        dict(bmi=math.inf),
        dict(townsend=math.nan),
        dict(systolic_bp=None),
        dict(cholesterol_ratio="4"),
        dict(smoking_category=5),
        dict(smoking_category=-1),
        dict(smoking_category=1.5),
        dict(ethnicity_category=10),
        dict(ethnicity_category=True),
        dict(atrial_fibrillation=2),
        dict(family_history="yes"),
    ],
)
def test_domain_errors(values):
    with pytest.raises(DomainError):
        get_model("2015", "F").evaluate(make_inputs(**values))


def test_domain_error_is_a_value_error():
    with pytest.raises(ValueError):
        get_model("2015", "M").evaluate(make_inputs(age=0))


@pytest.mark.parametrize("version", ["2011", "2012"])
@pytest.mark.parametrize("gender", ["F", "M"])
def test_diabetes_type1_unsupported_before_2015(version, gender):
    with pytest.raises(UnsupportedRiskFactor):
        get_model(version, gender).evaluate(make_inputs(diabetes_type1=True))


def test_diabetes_type1_supported_in_2015():
    model = get_model("2015", "M")

    with_type1 = model.evaluate(make_inputs(diabetes_type1=True))
    without_type1 = model.evaluate(make_inputs())

    assert with_type1 != without_type1


def test_boolean_factors_accept_zero_and_one():
    model = get_model("2012", "F")

    assert model.evaluate(make_inputs(renal_disease=1)) == model.evaluate(
        make_inputs(renal_disease=True)
    )
    assert model.evaluate(make_inputs(renal_disease=0)) == model.evaluate(make_inputs())


def test_numpy_booleans_are_accepted():
    model = get_model("2015", "M")

    assert model.evaluate(
        make_inputs(atrial_fibrillation=np.True_, renal_disease=np.False_)
    ) == model.evaluate(make_inputs(atrial_fibrillation=True))


def test_prior_cvd_is_ignored_and_logged_at_debug_level(caplog):
    model = get_model("2015", "F")
    expected = model.evaluate(make_inputs())

    with caplog.at_level(logging.DEBUG):
        risk = model.evaluate(make_inputs(prior_cvd=True))

    assert risk == expected
    prior_cvd_records = [r for r in caplog.records if "prior CVD" in r.getMessage()]
    assert [r.levelno for r in prior_cvd_records] == [logging.DEBUG]


def test_extreme_but_valid_values_are_scored():
    risk = get_model("2015", "M").evaluate(
        make_inputs(age=99, bmi=60, systolic_bp=250, cholesterol_ratio=12, townsend=11)
    )
    assert 0 <= risk <= 100
