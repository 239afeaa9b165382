import math
from dataclasses import dataclass
from typing import Optional, Tuple

from qrisk.risk_scores.coefficients import Coefficients

# Age and BMI enter the models scaled by 1/10 before the fractional
# polynomial transforms are applied.
SCALE = 10


@dataclass(frozen=True)
class FractionalPolynomial:
    """One fractional polynomial term of a scaled variable x.

    A power of 0 denotes log(x). Otherwise the term is x ** power, multiplied
    by log(x) if ``times_log`` is set (the repeated-power term).
    """

    power: float
    times_log: bool = False

    def __call__(self, x: float) -> float:
        if self.power == 0:
            return math.log(x)
        value = math.pow(x, self.power)
        if self.times_log:
            value = value * math.log(x)
        return value


@dataclass(frozen=True)
class Transform:
    """Fractional polynomial transforms of age (two terms) and BMI (one or two terms)."""

    age: Tuple[FractionalPolynomial, FractionalPolynomial]
    bmi: Tuple[FractionalPolynomial, ...]

    def __post_init__(self):
        if len(self.age) != 2:
            raise ValueError("Exactly two age terms are required.")
        if len(self.bmi) not in (1, 2):
            raise ValueError("One or two BMI terms are required.")


@dataclass(frozen=True)
class CentredVariables:
    age_1: float
    age_2: float
    bmi_1: float
    bmi_2: Optional[float]
    ratio: float
    systolic_bp: float
    townsend: float


def centre(
    transform: Transform,
    coefficients: Coefficients,
    age: float,
    bmi: float,
    cholesterol_ratio: float,
    systolic_bp: float,
    townsend: float,
) -> CentredVariables:
    """Apply the fractional polynomial transforms and subtract the centring constants.

    The domain is not checked here: age or BMI <= 0 makes the log and power
    terms undefined, so callers validate before.
    """
    if len(transform.bmi) == 2 and not coefficients.has_bmi_2:
        raise ValueError("Transform has two BMI terms but the coefficients only one.")
    if len(transform.bmi) == 1 and coefficients.has_bmi_2:
        raise ValueError("Transform has one BMI term but the coefficients two.")

    dage = age / SCALE
    dbmi = bmi / SCALE

    age_1 = transform.age[0](dage) - coefficients.mean_age_1
    age_2 = transform.age[1](dage) - coefficients.mean_age_2
    bmi_1 = transform.bmi[0](dbmi) - coefficients.mean_bmi_1
    bmi_2 = None
    if coefficients.has_bmi_2:
        bmi_2 = transform.bmi[1](dbmi) - coefficients.mean_bmi_2

    return CentredVariables(
        age_1=age_1,
        age_2=age_2,
        bmi_1=bmi_1,
        bmi_2=bmi_2,
        ratio=cholesterol_ratio - coefficients.mean_ratio,
        systolic_bp=systolic_bp - coefficients.mean_systolic_bp,
        townsend=townsend - coefficients.mean_townsend,
    )
