from typing import Optional

from qrisk.risk_scores.coefficients import Coefficients
from qrisk.risk_scores.transforms import CentredVariables


def _add(a: float, value: Optional[float], coefficient: Optional[float]) -> float:
    if value is None or coefficient is None:
        return a
    return a + value * coefficient


def _add_interaction(
    a: float, age: float, factor: Optional[float], coefficient: Optional[float]
) -> float:
    if factor is None or coefficient is None:
        return a
    return a + age * factor * coefficient


def _add_age_interactions(
    a: float,
    age: float,
    smoking_coefficients,
    interactions: dict,
    smoking_category: int,
    centred: CentredVariables,
    flags: dict,
) -> float:
    # exactly one smoking coefficient fires for categories 1..4, none for non smokers
    if smoking_category != 0:
        a = a + age * smoking_coefficients[smoking_category - 1]

    for name in (
        "atrial_fibrillation",
        "renal_disease",
        "treated_hypertension",
        "diabetes_type1",
        "diabetes_type2",
    ):
        if flags[name]:
            a = _add_interaction(a, age, 1, interactions[name])
    a = _add_interaction(a, age, centred.bmi_1, interactions["bmi_1"])
    a = _add_interaction(a, age, centred.bmi_2, interactions["bmi_2"])
    if flags["family_history"]:
        a = _add_interaction(a, age, 1, interactions["family_history"])
    a = _add_interaction(a, age, centred.systolic_bp, interactions["systolic_bp"])
    a = _add_interaction(a, age, centred.townsend, interactions["townsend"])
    return a


def _interactions(coefficients: Coefficients, prefix: str) -> dict:
    names = (
        "atrial_fibrillation",
        "renal_disease",
        "treated_hypertension",
        "diabetes_type1",
        "diabetes_type2",
        "bmi_1",
        "bmi_2",
        "family_history",
        "systolic_bp",
        "townsend",
    )
    return {name: getattr(coefficients, f"{prefix}_times_{name}") for name in names}


def linear_predictor(
    coefficients: Coefficients,
    centred: CentredVariables,
    ethnicity_category: int,
    smoking_category: int,
    atrial_fibrillation: bool = False,
    rheumatoid_arthritis: bool = False,
    renal_disease: bool = False,
    treated_hypertension: bool = False,
    diabetes_type1: bool = False,
    diabetes_type2: bool = False,
    family_history: bool = False,
) -> float:
    """
    Sum of the conditional, continuous, boolean and interaction terms.

    Terms are accumulated in a fixed order so that results are reproducible
    to the last bit:

        1. ethnicity and smoking adjustments
        2. continuous values: age_1, age_2, bmi_1, bmi_2, ratio, sbp, town
        3. boolean values: AF, RA, renal, treated hypertension, type 1,
           type 2, family history
        4. age_1 interactions: smoking category, AF, renal, treated
           hypertension, type 1, type 2, bmi_1, bmi_2, family history, sbp,
           town
        5. the same interactions with age_2

    Boolean factors that are absent and coefficients that are ``None`` add
    nothing.
    """
    flags = dict(
        atrial_fibrillation=bool(atrial_fibrillation),
        rheumatoid_arthritis=bool(rheumatoid_arthritis),
        renal_disease=bool(renal_disease),
        treated_hypertension=bool(treated_hypertension),
        diabetes_type1=bool(diabetes_type1),
        diabetes_type2=bool(diabetes_type2),
        family_history=bool(family_history),
    )

    a = 0.0

    # conditional sums
    a += coefficients.ethnicity[ethnicity_category]
    a += coefficients.smoking[smoking_category]

    # continuous values
    a = _add(a, centred.age_1, coefficients.age_1)
    a = _add(a, centred.age_2, coefficients.age_2)
    a = _add(a, centred.bmi_1, coefficients.bmi_1)
    a = _add(a, centred.bmi_2, coefficients.bmi_2)
    a = _add(a, centred.ratio, coefficients.ratio)
    a = _add(a, centred.systolic_bp, coefficients.systolic_bp)
    a = _add(a, centred.townsend, coefficients.townsend)

    # boolean values
    for name, present in flags.items():
        if present:
            a = _add(a, 1, getattr(coefficients, name))

    # interaction terms
    a = _add_age_interactions(
        a,
        centred.age_1,
        coefficients.age_1_times_smoking,
        _interactions(coefficients, "age_1"),
        smoking_category,
        centred,
        flags,
    )
    a = _add_age_interactions(
        a,
        centred.age_2,
        coefficients.age_2_times_smoking,
        _interactions(coefficients, "age_2"),
        smoking_category,
        centred,
        flags,
    )
    return a
