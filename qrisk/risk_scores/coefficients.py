from dataclasses import dataclass, fields
from typing import Optional, Tuple

# Lengths of the conditional arrays. Index 0 of the ethnicity array is "not
# recorded" and index 1 "White"; index 0 of the smoking array is "non smoker".
# Index 0 of the survival array is unused, years run from 1 to 15.
N_ETHNICITY_CATEGORIES = 10
N_SMOKING_CATEGORIES = 5
N_SURVIVAL_ENTRIES = 16

# coefficients that are only present in models with a second BMI term
BMI_2_FIELDS = ("mean_bmi_2", "bmi_2", "age_1_times_bmi_2", "age_2_times_bmi_2")

# coefficients that are only present in models with diabetes type 1
DIABETES_TYPE1_FIELDS = (
    "diabetes_type1",
    "age_1_times_diabetes_type1",
    "age_2_times_diabetes_type1",
)


# COEFFICIENTS
@dataclass(frozen=True)
class Coefficients:
    """Coefficient table of one QRISK2 model (version x gender).

    Coefficients a version does not define are ``None`` rather than 0, so that
    the set of terms entering the linear predictor is explicit.
    """

    # centring constants (means of the transformed variables)
    mean_age_1: float
    mean_age_2: float
    mean_bmi_1: float
    mean_bmi_2: Optional[float]
    mean_ratio: float
    mean_systolic_bp: float
    mean_townsend: float

    # conditional arrays
    ethnicity: Tuple[float, ...]
    smoking: Tuple[float, ...]

    # continuous values
    age_1: float
    age_2: float
    bmi_1: float
    bmi_2: Optional[float]
    ratio: float
    systolic_bp: float
    townsend: float

    # boolean values
    atrial_fibrillation: float
    rheumatoid_arthritis: float
    renal_disease: float
    treated_hypertension: float
    diabetes_type1: Optional[float]
    diabetes_type2: float
    family_history: float

    # interaction terms with age_1, smoking indexed by category 1..4
    age_1_times_smoking: Tuple[float, float, float, float]
    age_1_times_atrial_fibrillation: float
    age_1_times_renal_disease: float
    age_1_times_treated_hypertension: float
    age_1_times_diabetes_type1: Optional[float]
    age_1_times_diabetes_type2: float
    age_1_times_bmi_1: float
    age_1_times_bmi_2: Optional[float]
    age_1_times_family_history: float
    age_1_times_systolic_bp: float
    age_1_times_townsend: float

    # interaction terms with age_2
    age_2_times_smoking: Tuple[float, float, float, float]
    age_2_times_atrial_fibrillation: float
    age_2_times_renal_disease: float
    age_2_times_treated_hypertension: float
    age_2_times_diabetes_type1: Optional[float]
    age_2_times_diabetes_type2: float
    age_2_times_bmi_1: float
    age_2_times_bmi_2: Optional[float]
    age_2_times_family_history: float
    age_2_times_systolic_bp: float
    age_2_times_townsend: float

    # baseline survival by follow-up year, index 0 unused
    baseline_survival: Tuple[float, ...]

    def __post_init__(self):
        if len(self.ethnicity) != N_ETHNICITY_CATEGORIES:
            raise ValueError(
                f"Expected {N_ETHNICITY_CATEGORIES} ethnicity coefficients, got {len(self.ethnicity)}."
            )
        if len(self.smoking) != N_SMOKING_CATEGORIES:
            raise ValueError(
                f"Expected {N_SMOKING_CATEGORIES} smoking coefficients, got {len(self.smoking)}."
            )
        if self.ethnicity[0] != 0 or self.ethnicity[1] != 0:
            raise ValueError("Not recorded and White ethnicity must have zero adjustment.")
        if self.smoking[0] != 0:
            raise ValueError("Non smokers must have zero smoking adjustment.")
        for name in ("age_1_times_smoking", "age_2_times_smoking"):
            if len(getattr(self, name)) != N_SMOKING_CATEGORIES - 1:
                raise ValueError(
                    f"Expected {N_SMOKING_CATEGORIES - 1} values for {name}."
                )
        if len(self.baseline_survival) != N_SURVIVAL_ENTRIES:
            raise ValueError(
                f"Expected {N_SURVIVAL_ENTRIES} baseline survival entries, got {len(self.baseline_survival)}."
            )
        for group in (BMI_2_FIELDS, DIABETES_TYPE1_FIELDS):
            defined = [getattr(self, name) is not None for name in group]
            if any(defined) and not all(defined):
                raise ValueError(f"Coefficients {group} must be defined together.")

        # None-valued fields are legitimate, everything else must be numeric
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None or isinstance(value, tuple):
                continue
            if not isinstance(value, (int, float)):
                raise TypeError(f"Coefficient {field.name} must be a number.")

    @property
    def has_bmi_2(self) -> bool:
        return self.bmi_2 is not None

    @property
    def has_diabetes_type1(self) -> bool:
        return self.diabetes_type1 is not None

    @property
    def max_follow_up_year(self) -> int:
        return len(self.baseline_survival) - 1
