import math
import numbers
from typing import Sequence

from qrisk.risk_scores.errors import InvalidFollowUpYear


def check_follow_up_year(baseline_survival: Sequence[float], year: int) -> int:
    """Return ``year`` if it indexes a survival entry. Index 0 is a sentinel."""
    if isinstance(year, bool) or not isinstance(year, numbers.Integral):
        raise InvalidFollowUpYear(
            f"Follow-up year must be an integer. Value was: {year!r}"
        )
    max_year = len(baseline_survival) - 1
    if not 1 <= year <= max_year:
        raise InvalidFollowUpYear(
            f"Follow-up year must be between 1 and {max_year}. Value was: {year}"
        )
    return int(year)


def survival_probability(
    baseline_survival: Sequence[float], a: float, year: int
) -> float:
    """Event-free probability after ``year`` years, S[year] ** exp(a)."""
    year = check_follow_up_year(baseline_survival, year)
    return baseline_survival[year] ** math.exp(a)


def risk_percentage(baseline_survival: Sequence[float], a: float, year: int) -> float:
    """Risk of an event within ``year`` years in percent, 100 * (1 - S[year] ** exp(a)).

    The result is not clamped to [0, 100).
    """
    return 100.0 * (1 - survival_probability(baseline_survival, a, year))
