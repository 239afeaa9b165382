import dataclasses

import pytest

from qrisk.risk_scores.coefficients import (
    BMI_2_FIELDS,
    N_ETHNICITY_CATEGORIES,
    N_SMOKING_CATEGORIES,
    N_SURVIVAL_ENTRIES,
)
from qrisk.risk_scores.registry import available_models, get_model


@pytest.mark.parametrize("version, gender", available_models())
def test_table_shapes(version, gender):
    c = get_model(version, gender).coefficients

    assert len(c.ethnicity) == N_ETHNICITY_CATEGORIES
    assert len(c.smoking) == N_SMOKING_CATEGORIES
    assert len(c.age_1_times_smoking) == N_SMOKING_CATEGORIES - 1
    assert len(c.age_2_times_smoking) == N_SMOKING_CATEGORIES - 1
    assert len(c.baseline_survival) == N_SURVIVAL_ENTRIES


@pytest.mark.parametrize("version, gender", available_models())
def test_reference_categories_are_zero(version, gender):
    c = get_model(version, gender).coefficients

    assert c.ethnicity[0] == 0
    assert c.ethnicity[1] == 0
    assert c.smoking[0] == 0


@pytest.mark.parametrize("version, gender", available_models())
def test_baseline_survival_is_a_probability_decreasing_with_time(version, gender):
    survival = get_model(version, gender).coefficients.baseline_survival[1:]

    assert all(0 < s < 1 for s in survival)
    assert all(later < earlier for earlier, later in zip(survival, survival[1:]))


def test_wrong_array_lengths_are_rejected():
    c = get_model("2015", "F").coefficients

    with pytest.raises(ValueError):
        dataclasses.replace(c, ethnicity=c.ethnicity[:-1])
    with pytest.raises(ValueError):
        dataclasses.replace(c, smoking=c.smoking + (0.1,))
    with pytest.raises(ValueError):
        dataclasses.replace(c, age_1_times_smoking=c.age_1_times_smoking[:3])
    with pytest.raises(ValueError):
        dataclasses.replace(c, baseline_survival=c.baseline_survival[:10])


def test_nonzero_reference_category_is_rejected():
    c = get_model("2015", "M").coefficients

    with pytest.raises(ValueError):
        dataclasses.replace(c, ethnicity=(0.1,) + c.ethnicity[1:])
    with pytest.raises(ValueError):
        dataclasses.replace(c, smoking=(0.1,) + c.smoking[1:])


def test_optional_groups_are_defined_together():
    c = get_model("2015", "M").coefficients

    with pytest.raises(ValueError):
        dataclasses.replace(c, bmi_2=None)
    with pytest.raises(ValueError):
        dataclasses.replace(c, age_2_times_diabetes_type1=None)


def test_dropping_a_whole_group_is_allowed():
    c = get_model("2015", "M").coefficients
    without_bmi_2 = dataclasses.replace(c, **{name: None for name in BMI_2_FIELDS})

    assert not without_bmi_2.has_bmi_2


def test_non_numeric_coefficient_is_rejected():
    c = get_model("2012", "F").coefficients

    with pytest.raises(TypeError):
        dataclasses.replace(c, ratio="0.15")


def test_coefficients_are_frozen():
    c = get_model("2015", "F").coefficients

    with pytest.raises(dataclasses.FrozenInstanceError):
        c.ratio = 0.0
