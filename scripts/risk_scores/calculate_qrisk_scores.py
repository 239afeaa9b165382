import argparse
import logging
from pathlib import Path

import pandas as pd

import qrisk.utils.logger
from qrisk.data.qrisk_inputs import calculate_qrisk_scores, prepare_inputs
from qrisk.risk_scores.registry import get_model
from qrisk.utils.config import RESULTS_PATH, load_settings


def parse_args():
    """
    Parse command-line arguments for batch scoring.

    Returns:
        argparse.Namespace: Parsed arguments with input, output, settings, version and follow_up_year.
    """
    parser = argparse.ArgumentParser(
        description="Calculate QRISK2 scores for every row of a CSV file."
    )
    parser.add_argument("--input", help="Path to the input CSV file.", required=True)
    parser.add_argument(
        "--output",
        help="Path to the output CSV file.",
        default=str(RESULTS_PATH / "risk_scores" / "qrisk_scores.csv"),
    )
    parser.add_argument(
        "--settings",
        help="YAML file with settings overriding the defaults in config/risk_scores.",
        default=None,
    )
    parser.add_argument(
        "--version",
        help="QRISK2 version (2011, 2012 or 2015). Defaults to the settings.",
        default=None,
    )
    parser.add_argument(
        "--follow_up_year",
        help="Follow-up year of the survival table (1-15). Defaults to the settings.",
        type=int,
        default=None,
    )
    parser.add_argument(
        "--index_col",
        help="Column of the input file to use as index, e.g. eid.",
        default=None,
    )
    return parser.parse_args()


def main():
    logger = logging.getLogger()
    args = parse_args()
    logger.info(f"args: {args.__dict__}")

    settings = load_settings(args.settings)
    version = args.version if args.version is not None else settings["version"]
    follow_up_year = (
        args.follow_up_year
        if args.follow_up_year is not None
        else settings["follow_up_year"]
    )
    logger.info(
        f"Calculate {get_model(version, 'M').name} scores, follow-up year {follow_up_year}"
    )

    df = pd.read_csv(args.input, index_col=args.index_col, low_memory=False)
    inputs = prepare_inputs(df, settings)
    qrisk_scores = calculate_qrisk_scores(
        inputs, version=version, follow_up_year=follow_up_year, progress=True
    )

    n_skipped = int(qrisk_scores.isna().sum())
    logger.info(
        f"Scored {len(qrisk_scores) - n_skipped} rows, skipped {n_skipped} incomplete rows."
    )

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    qrisk_scores.to_csv(output)
    logger.info(f"Saved QRISK2 scores to '{output}'")


if __name__ == "__main__":
    main()
