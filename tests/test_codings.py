import pytest

from qrisk.data import codings
from qrisk.risk_scores.errors import DomainError


@pytest.mark.parametrize(
    "label, code",
    [
        ("Not recorded", 0),
        ("White", 1),
        ("Indian", 2),
        ("bangladeshi", 4),
        ("  Black African ", 7),
        ("Other ethnic group", 9),
    ],
)
def test_ethnicity_category(label, code):
    assert codings.ethnicity_category(label) == code


@pytest.mark.parametrize(
    "label, code",
    [("Non smoker", 0), ("ex smoker", 1), ("Light smoker", 2), ("Heavy smoker", 4)],
)
def test_smoking_category(label, code):
    assert codings.smoking_category(label) == code


@pytest.mark.parametrize("label", ["Martian", "", 3, None])
def test_unknown_labels_raise(label):
    with pytest.raises(DomainError):
        codings.ethnicity_category(label)
    with pytest.raises(DomainError):
        codings.smoking_category(label)


def test_codes_follow_the_order_of_the_categories():
    for code, label in enumerate(codings.ETHNICITY_CATEGORIES):
        assert codings.ethnicity_category(label) == code
    for code, label in enumerate(codings.SMOKING_CATEGORIES):
        assert codings.smoking_category(label) == code
