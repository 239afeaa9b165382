import logging
import time

import numpy as np
import pandas as pd
from tqdm import tqdm

from qrisk.data import codings
from qrisk.risk_scores import QRISK2
from qrisk.risk_scores.errors import DomainError
from qrisk.risk_scores.model import BOOLEAN_INPUTS, DEFAULT_FOLLOW_UP_YEAR
from qrisk.risk_scores.registry import LATEST_VERSION, get_model
from qrisk.risk_scores.survival import check_follow_up_year

REQUIRED_COLUMNS = [
    "gender",
    "age",
    "bmi",
    "townsend",
    "systolic_bp",
    "cholesterol_ratio",
    "smoking_category",
    "ethnicity_category",
]

CATEGORY_LOOKUPS = {
    "smoking_category": codings.smoking_category,
    "ethnicity_category": codings.ethnicity_category,
}


def prepare_column(vals: pd.Series, strategy: dict) -> pd.Series:
    if strategy.get("map_dict"):
        map_dict = strategy["map_dict"]
        # unmapped values are kept, so that canonical labels and codes pass through
        vals = vals.map(lambda x: map_dict.get(x, x) if isinstance(x, str) else x)
    return vals


def _to_code(x, lookup):
    if isinstance(x, str):
        return lookup(x)
    return x


def _as_category(value):
    # columns holding NaN are float, codes like 2.0 are turned back into ints
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def prepare_inputs(df: pd.DataFrame, settings: dict) -> pd.DataFrame:
    """
    Construct a table of QRISK2 inputs from a source table.

    Columns are renamed according to ``settings["columns"]`` and prepared with
    the ``map_dict`` of ``settings["preparation"]``. Smoking and ethnicity
    labels are converted to category codes. If no cholesterol ratio is given it
    is derived from total and HDL cholesterol. Missing boolean factors are
    False, other missing values are filled from ``settings["impute"]``.
    """
    columns = settings.get("columns", {})
    preparation = settings.get("preparation", {})

    inputs = pd.DataFrame(index=df.index)
    for field, col in columns.items():
        if col is None or col not in df.columns:
            logging.debug(f"Column {col} for {field} not found.")
            continue
        inputs[field] = prepare_column(df[col], preparation.get(field, {}))

    for field, lookup in CATEGORY_LOOKUPS.items():
        if field in inputs:
            inputs[field] = inputs[field].map(lambda x: _to_code(x, lookup))

    if "cholesterol_ratio" not in inputs and {
        "total_cholesterol",
        "hdl_cholesterol",
    }.issubset(inputs.columns):
        logging.info("Derive cholesterol ratio from total and HDL cholesterol.")
        inputs["cholesterol_ratio"] = (
            inputs["total_cholesterol"] / inputs["hdl_cholesterol"]
        )
    inputs = inputs.drop(
        columns=["total_cholesterol", "hdl_cholesterol"], errors="ignore"
    )

    for field, value in settings.get("impute", {}).items():
        if field not in inputs:
            inputs[field] = value
        else:
            inputs[field] = inputs[field].where(inputs[field].notna(), value)

    for field in BOOLEAN_INPUTS:
        if field not in inputs:
            inputs[field] = False
            continue
        vals = inputs[field].fillna(0)
        if not vals.map(lambda x: x in (0, 1)).all():
            raise DomainError(f"Column {field} must only contain boolean values.")
        inputs[field] = vals.astype(bool)

    for field in REQUIRED_COLUMNS:
        if field not in inputs:
            inputs[field] = np.nan

    return inputs


def values_complete(inputs: pd.Series) -> bool:
    return inputs[REQUIRED_COLUMNS].isna().sum() == 0


def calculate_qrisk_scores(
    inputs: pd.DataFrame,
    version: str = LATEST_VERSION,
    follow_up_year: int = DEFAULT_FOLLOW_UP_YEAR,
    progress: bool = False,
) -> pd.Series:
    """Risk in percent for every row of ``inputs``, NaN where inputs are incomplete."""
    model = get_model(version, "M")
    check_follow_up_year(model.coefficients.baseline_survival, follow_up_year)

    n_prior_cvd = int(inputs["prior_cvd"].sum()) if "prior_cvd" in inputs else 0
    if n_prior_cvd > 0:
        logging.warning(
            f"{n_prior_cvd} rows have prior CVD. {model.name} is not intended for "
            "patients with prior CVD, prior_cvd does not enter the score."
        )

    start_time = time.time()
    scores = []
    for _, x in tqdm(
        inputs.iterrows(), total=len(inputs), desc="QRISK2", disable=not progress
    ):
        if not values_complete(x):
            scores.append(np.nan)
            continue
        score = QRISK2.calculate_risk(
            gender=x["gender"],
            age=x["age"],
            bmi=x["bmi"],
            townsend=x["townsend"],
            systolic_bp=x["systolic_bp"],
            cholesterol_ratio=x["cholesterol_ratio"],
            family_history=bool(x["family_history"]),
            smoking_category=_as_category(x["smoking_category"]),
            treated_hypertension=bool(x["treated_hypertension"]),
            diabetes_type1=bool(x["diabetes_type1"]),
            diabetes_type2=bool(x["diabetes_type2"]),
            atrial_fibrillation=bool(x["atrial_fibrillation"]),
            rheumatoid_arthritis=bool(x["rheumatoid_arthritis"]),
            renal_disease=bool(x["renal_disease"]),
            ethnicity_category=_as_category(x["ethnicity_category"]),
            prior_cvd=bool(x["prior_cvd"]),
            follow_up_year=follow_up_year,
            version=version,
        )
        scores.append(score)
    end_time = time.time()

    qrisk_scores = pd.Series(
        scores,
        index=inputs.index,
        name="qrisk2",
        dtype=float,
    )
    logging.info(
        f"Execution time: {end_time - start_time:.2f} seconds for {len(qrisk_scores)} samples "
        f"({qrisk_scores.isna().sum()} incomplete)"
    )
    return qrisk_scores
