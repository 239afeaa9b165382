from qrisk.risk_scores.errors import DomainError

# Category labels in the order of the QRISK2 conditional arrays.
ETHNICITY_CATEGORIES = (
    "Not recorded",
    "White",
    "Indian",
    "Pakistani",
    "Bangladeshi",
    "Other Asian",
    "Black Caribbean",
    "Black African",
    "Chinese",
    "Other ethnic group",
)

SMOKING_CATEGORIES = (
    "Non smoker",
    "Ex smoker",
    "Light smoker",  # < 10 cigarettes a day
    "Moderate smoker",  # 10 - 19 cigarettes a day
    "Heavy smoker",  # 20 or more cigarettes a day
)

ETHNICITY_CODES = {label.lower(): code for code, label in enumerate(ETHNICITY_CATEGORIES)}
SMOKING_CODES = {label.lower(): code for code, label in enumerate(SMOKING_CATEGORIES)}


def _lookup(codes: dict, label: str, kind: str) -> int:
    try:
        return codes[label.strip().lower()]
    except (AttributeError, KeyError):
        raise DomainError(
            f"Unknown {kind} category {label!r}. Known categories: {list(codes)}"
        ) from None


def ethnicity_category(label: str) -> int:
    """Code of an ethnicity label, e.g. "Indian" -> 2."""
    return _lookup(ETHNICITY_CODES, label, "ethnicity")


def smoking_category(label: str) -> int:
    """Code of a smoking status label, e.g. "Ex smoker" -> 1."""
    return _lookup(SMOKING_CODES, label, "smoking")