import os
from pathlib import Path
from typing import Optional, Union

import yaml

# PATHS
CONFIG_PATH = Path(
    os.environ.get("CONFIG_PATH", Path(__file__).resolve().parents[2] / "config")
)
RESULTS_PATH = Path(os.environ.get("RESULTS_PATH", "results"))
DEFAULT_SETTINGS_PATH = CONFIG_PATH / "risk_scores" / "qrisk_settings.yaml"


def merge_settings(defaults: dict, overrides: dict) -> dict:
    """Recursively merge ``overrides`` into a copy of ``defaults``."""
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    path: Optional[Union[str, Path]] = None,
    defaults_path: Union[str, Path] = DEFAULT_SETTINGS_PATH,
) -> dict:
    """Load the default QRISK2 settings and merge the settings file at ``path`` over them."""
    with open(defaults_path, "r") as f:
        settings = yaml.safe_load(f) or {}
    if path is not None:
        with open(path, "r") as f:
            settings = merge_settings(settings, yaml.safe_load(f) or {})
    return settings
