from qrisk.risk_scores.model import DEFAULT_FOLLOW_UP_YEAR, Inputs
from qrisk.risk_scores.registry import LATEST_VERSION, get_model

# QRISK2 (Hippisley-Cox et al. 2008) in the 2011, 2012 and 2015 releases.
# Continuous variables are transformed with fractional polynomials and
# centred; the score is 100 * (1 - S[year] ** exp(a)).


def evaluate(version: str, gender: str, inputs: Inputs) -> float:
    """Risk in percent for the model registered for (version, gender)."""
    return get_model(version, gender).evaluate(inputs)


# ALGORITHM
def calculate_risk(
    gender,
    age,
    bmi,
    townsend,
    systolic_bp,  # mmHg
    cholesterol_ratio,
    family_history,
    smoking_category,
    treated_hypertension,
    diabetes_type2,
    atrial_fibrillation,
    rheumatoid_arthritis,
    renal_disease,
    ethnicity_category,
    follow_up_year=DEFAULT_FOLLOW_UP_YEAR,
    diabetes_type1=False,
    prior_cvd=False,
    version=LATEST_VERSION,
) -> float:
    inputs = Inputs(
        age=age,
        bmi=bmi,
        townsend=townsend,
        systolic_bp=systolic_bp,
        cholesterol_ratio=cholesterol_ratio,
        smoking_category=smoking_category,
        ethnicity_category=ethnicity_category,
        family_history=family_history,
        treated_hypertension=treated_hypertension,
        diabetes_type1=diabetes_type1,
        diabetes_type2=diabetes_type2,
        atrial_fibrillation=atrial_fibrillation,
        rheumatoid_arthritis=rheumatoid_arthritis,
        renal_disease=renal_disease,
        prior_cvd=prior_cvd,
        follow_up_year=follow_up_year,
    )
    return evaluate(version, gender, inputs)


if __name__ == "__main__":
    # White non smoker without risk factors
    reference_male = dict(
        gender="M",
        age=60,
        bmi=25,
        townsend=0,
        systolic_bp=130,
        cholesterol_ratio=4,
        family_history=False,
        smoking_category=0,
        treated_hypertension=False,
        diabetes_type2=False,
        atrial_fibrillation=False,
        rheumatoid_arthritis=False,
        renal_disease=False,
        ethnicity_category=1,
    )

    for version in ("2011", "2012", "2015"):
        print(version, calculate_risk(**reference_male, version=version))
