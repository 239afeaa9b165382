import runpy
import sys

import pandas as pd
import pytest

from conftest import ROOT
from qrisk.risk_scores.errors import InvalidFollowUpYear, UnsupportedModel

SCRIPT = ROOT / "scripts" / "risk_scores" / "calculate_qrisk_scores.py"


@pytest.fixture
def cohort_csv(tmp_path):
    source = tmp_path / "cohort.csv"
    pd.DataFrame(
        {
            "eid": [1, 2],
            "gender": ["Male", "Male"],
            "age": [60, 60],
            "bmi": [25, None],
            "townsend_score": [0, 0],
            "systolic_bp": [130, 130],
            "cholesterol_ratio": [4, 4],
            "smoking_status": ["Never", "Never"],
            "ethnic_background": ["British", "British"],
        }
    ).to_csv(source, index=False)
    return source


def run_script(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_script_writes_scores(tmp_path, monkeypatch, cohort_csv):
    output = tmp_path / "out" / "scores.csv"

    run_script(
        monkeypatch,
        "--input",
        str(cohort_csv),
        "--output",
        str(output),
        "--index_col",
        "eid",
    )

    scores = pd.read_csv(output, index_col="eid")["qrisk2"]
    assert scores[1] == pytest.approx(9.6366661318896938, rel=1e-9)
    assert pd.isna(scores[2])


def test_script_rejects_follow_up_year_zero(tmp_path, monkeypatch, cohort_csv):
    output = tmp_path / "scores.csv"

    with pytest.raises(InvalidFollowUpYear):
        run_script(
            monkeypatch,
            "--input",
            str(cohort_csv),
            "--output",
            str(output),
            "--follow_up_year",
            "0",
        )
    assert not output.exists()


def test_script_rejects_empty_version(tmp_path, monkeypatch, cohort_csv):
    with pytest.raises(UnsupportedModel):
        run_script(
            monkeypatch,
            "--input",
            str(cohort_csv),
            "--output",
            str(tmp_path / "scores.csv"),
            "--version",
            "",
        )
