"""
Dimension Scorers

Point contribution of each scoring factor. Both the Simple and the Pro scorer
add these up; they differ only in how the totals are combined.
"""

from typing import Optional

from .constants import (
    COUPLED_BUDGET_COMFORT_POINTS,
    COUPLED_BUDGET_COMFORT_RATIO,
    COUPLED_BUDGET_FITS_POINTS,
    COUPLED_BUDGET_OVER_POINTS,
    BUDGET_POINTS,
    DISCIPLINE_POINTS,
    ENGLISH_POINTS,
    GPA_BAND_POINTS,
    GPA_DIFF_BANDS,
    SCHOLARSHIP_BONUS,
    STANDARDIZED_TEST_POINTS,
    EnglishStatus,
    GpaBand,
)
from .contracts import University, UserProfile
from .requirement_checks import (
    StandardizedTestCheck,
    budget_ceiling,
    scholarship_bonus_applies,
)


def gpa_band(user_gpa: float, min_gpa: Optional[float]) -> Optional[GpaBand]:
    """Band of the GPA difference, None when there is no requirement."""
    if min_gpa is None:
        return None

    # rounded so that e.g. 3.3 - 3.6 lands on -0.3, not just below it
    diff = round(user_gpa - min_gpa, 6)
    for threshold, band in GPA_DIFF_BANDS:
        if diff >= threshold:
            return band
    return GpaBand.WELL_BELOW


def score_gpa(user_gpa: float, min_gpa: Optional[float]) -> int:
    """Graduated award from -20 to +20; no requirement scores 0."""
    band = gpa_band(user_gpa, min_gpa)
    return 0 if band is None else GPA_BAND_POINTS[band]


def gpa_matches(user_gpa: float, min_gpa: Optional[float]) -> bool:
    return min_gpa is None or user_gpa >= min_gpa


def score_english(status: EnglishStatus) -> int:
    return ENGLISH_POINTS[EnglishStatus(status)]


def score_standardized_test(check: StandardizedTestCheck) -> int:
    if not check.required:
        return 0
    return STANDARDIZED_TEST_POINTS if check.meets else -STANDARDIZED_TEST_POINTS


def score_budget(budget_match: bool) -> int:
    return BUDGET_POINTS if budget_match else -BUDGET_POINTS


def score_budget_coupled(profile: UserProfile, university: University) -> int:
    """Earlier Pro weighting: small reward for fitting, heavy penalty for exceeding."""
    ceiling = budget_ceiling(profile) or 0
    tuition = university.requirements.tuition_usd
    if tuition <= ceiling * COUPLED_BUDGET_COMFORT_RATIO:
        return COUPLED_BUDGET_COMFORT_POINTS
    if tuition <= ceiling:
        return COUPLED_BUDGET_FITS_POINTS
    return COUPLED_BUDGET_OVER_POINTS


def score_discipline(discipline_match: bool) -> int:
    return DISCIPLINE_POINTS if discipline_match else -DISCIPLINE_POINTS


def score_scholarship(profile: UserProfile, university: University) -> int:
    return SCHOLARSHIP_BONUS if scholarship_bonus_applies(profile, university) else 0
