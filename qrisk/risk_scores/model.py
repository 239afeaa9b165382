import logging
import math
import numbers
from dataclasses import dataclass
from typing import Literal

import numpy as np

from qrisk.risk_scores.coefficients import Coefficients
from qrisk.risk_scores.errors import DomainError, UnsupportedRiskFactor
from qrisk.risk_scores.linear_predictor import linear_predictor
from qrisk.risk_scores.survival import check_follow_up_year, risk_percentage
from qrisk.risk_scores.transforms import CentredVariables, Transform, centre

DEFAULT_FOLLOW_UP_YEAR = 10

BOOLEAN_INPUTS = (
    "atrial_fibrillation",
    "rheumatoid_arthritis",
    "renal_disease",
    "treated_hypertension",
    "diabetes_type1",
    "diabetes_type2",
    "family_history",
    "prior_cvd",
)


@dataclass(frozen=True)
class Inputs:
    age: float  # years
    bmi: float  # kg/m2
    townsend: float  # deprivation score
    systolic_bp: float  # mmHg
    cholesterol_ratio: float  # total cholesterol / HDL cholesterol
    smoking_category: int  # 0 non smoker .. 4 heavy smoker
    ethnicity_category: int  # 0 not recorded, 1 White, .. 9 other
    family_history: bool = False  # CHD in first degree relative < 60
    treated_hypertension: bool = False
    diabetes_type1: bool = False
    diabetes_type2: bool = False
    atrial_fibrillation: bool = False
    rheumatoid_arthritis: bool = False
    renal_disease: bool = False
    prior_cvd: bool = False
    follow_up_year: int = DEFAULT_FOLLOW_UP_YEAR


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_category(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_inputs(inputs: Inputs, coefficients: Coefficients) -> None:
    """Raise DomainError for inputs outside the domain of the model formulas.

    Only the intrinsic domain is checked (positive age and BMI, finite values,
    existing categories). Physiological plausibility is left to the caller.
    """
    for name in ("age", "bmi", "townsend", "systolic_bp", "cholesterol_ratio"):
        value = getattr(inputs, name)
        if not _is_number(value) or not math.isfinite(value):
            raise DomainError(f"{name} must be a finite number. Value was: {value!r}")
    if inputs.age <= 0:
        raise DomainError(f"age must be positive. Value was: {inputs.age}")
    if inputs.bmi <= 0:
        raise DomainError(f"bmi must be positive. Value was: {inputs.bmi}")

    n_smoking = len(coefficients.smoking)
    if not _is_category(inputs.smoking_category) or not (
        0 <= inputs.smoking_category < n_smoking
    ):
        raise DomainError(
            f"smoking_category must be an integer between 0 and {n_smoking - 1}. Value was: {inputs.smoking_category!r}"
        )
    n_ethnicity = len(coefficients.ethnicity)
    if not _is_category(inputs.ethnicity_category) or not (
        0 <= inputs.ethnicity_category < n_ethnicity
    ):
        raise DomainError(
            f"ethnicity_category must be an integer between 0 and {n_ethnicity - 1}. Value was: {inputs.ethnicity_category!r}"
        )

    for name in BOOLEAN_INPUTS:
        value = getattr(inputs, name)
        # numpy.bool_ is not registered as a number, pandas frames hand it out
        if not (
            _is_number(value) or isinstance(value, (bool, np.bool_))
        ) or value not in (0, 1):
            raise DomainError(f"{name} must be a boolean. Value was: {value!r}")

    if inputs.diabetes_type1 and not coefficients.has_diabetes_type1:
        raise UnsupportedRiskFactor(
            "diabetes_type1 is not a risk factor of this model version."
        )


@dataclass(frozen=True)
class QRiskModel:
    """One QRISK2 model: a version and gender with its transforms and coefficients."""

    version: str
    gender: Literal["F", "M"]
    name: str
    transform: Transform
    coefficients: Coefficients

    def centre(self, inputs: Inputs) -> CentredVariables:
        validate_inputs(inputs, self.coefficients)
        return centre(
            self.transform,
            self.coefficients,
            age=inputs.age,
            bmi=inputs.bmi,
            cholesterol_ratio=inputs.cholesterol_ratio,
            systolic_bp=inputs.systolic_bp,
            townsend=inputs.townsend,
        )

    def linear_predictor(self, inputs: Inputs) -> float:
        if inputs.prior_cvd:
            logging.debug(
                f"{self.name} is not intended for patients with prior CVD, "
                "prior_cvd does not enter the score."
            )
        centred = self.centre(inputs)
        return linear_predictor(
            self.coefficients,
            centred,
            ethnicity_category=int(inputs.ethnicity_category),
            smoking_category=int(inputs.smoking_category),
            atrial_fibrillation=inputs.atrial_fibrillation,
            rheumatoid_arthritis=inputs.rheumatoid_arthritis,
            renal_disease=inputs.renal_disease,
            treated_hypertension=inputs.treated_hypertension,
            diabetes_type1=inputs.diabetes_type1,
            diabetes_type2=inputs.diabetes_type2,
            family_history=inputs.family_history,
        )

    def evaluate(self, inputs: Inputs) -> float:
        """Risk of a cardiovascular event within ``inputs.follow_up_year`` years, in percent."""
        year = check_follow_up_year(
            self.coefficients.baseline_survival, inputs.follow_up_year
        )
        a = self.linear_predictor(inputs)
        return risk_percentage(self.coefficients.baseline_survival, a, year)
