from pathlib import Path

import pytest

from qrisk.risk_scores.model import Inputs

ROOT = Path(__file__).resolve().parents[1]
SETTINGS_PATH = ROOT / "config" / "risk_scores" / "qrisk_settings.yaml"

# White non smoker with average values and no risk factors
REFERENCE = dict(
    age=60,
    bmi=25,
    townsend=0,
    systolic_bp=130,
    cholesterol_ratio=4,
    smoking_category=0,
    ethnicity_category=1,
    follow_up_year=10,
)


def make_inputs(**kwargs) -> Inputs:
    values = dict(REFERENCE)
    values.update(kwargs)
    return Inputs(**values)


@pytest.fixture
def reference_inputs() -> Inputs:
    return make_inputs()


@pytest.fixture
def settings_path() -> Path:
    return SETTINGS_PATH
