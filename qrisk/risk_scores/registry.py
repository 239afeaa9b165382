import logging
from typing import Dict, List, Tuple

from qrisk.risk_scores import QRISK2_2011, QRISK2_2012, QRISK2_2015
from qrisk.risk_scores.errors import UnsupportedModel
from qrisk.risk_scores.model import QRiskModel

VERSION_MODULES = (QRISK2_2011, QRISK2_2012, QRISK2_2015)
LATEST_VERSION = QRISK2_2015.VERSION

GENDER_ALIASES = {
    "f": "F",
    "female": "F",
    "m": "M",
    "male": "M",
}


def _build_models() -> Dict[Tuple[str, str], QRiskModel]:
    models = {}
    for module in VERSION_MODULES:
        models[(module.VERSION, "F")] = QRiskModel(
            version=module.VERSION,
            gender="F",
            name=module.NAME,
            transform=module.TRANSFORM_FEMALE,
            coefficients=module.COEFFICIENTS_FEMALE,
        )
        models[(module.VERSION, "M")] = QRiskModel(
            version=module.VERSION,
            gender="M",
            name=module.NAME,
            transform=module.TRANSFORM_MALE,
            coefficients=module.COEFFICIENTS_MALE,
        )
    return models


# built once at import, read-only afterwards
MODELS = _build_models()

VERSION_ALIASES = {
    alias.lower(): module.VERSION
    for module in VERSION_MODULES
    for alias in (module.VERSION, module.NAME)
}


def normalise_version(version) -> str:
    key = str(version).strip().lower()
    if key not in VERSION_ALIASES:
        raise UnsupportedModel(
            f"Unknown QRISK2 version {version!r}. Available versions: {sorted(set(VERSION_ALIASES.values()))}"
        )
    return VERSION_ALIASES[key]


def normalise_gender(gender) -> str:
    key = str(gender).strip().lower()
    if key not in GENDER_ALIASES:
        raise UnsupportedModel(f"Gender must be 'F' or 'M'. Value was: {gender}")
    return GENDER_ALIASES[key]


def get_model(version, gender) -> QRiskModel:
    """Return the model registered for (version, gender), e.g. ("2015", "M")."""
    key = (normalise_version(version), normalise_gender(gender))
    if key not in MODELS:
        raise UnsupportedModel(f"No QRISK2 model registered for {key}.")
    logging.debug(f"Using {MODELS[key].name} model for gender {key[1]}")
    return MODELS[key]


def available_models() -> List[Tuple[str, str]]:
    return sorted(MODELS)
