"""
Result Aggregator

Maps every catalog entry through the selected scorer and applies the
country-of-study post-filter. Sorting is kept separate so display order policy
stays independent of scoring.
"""

import logging
from typing import Iterable, List

from .constants import ANY_COUNTRY, ProMode, ScoringAlgorithm
from .contracts import ScoringResult, University, UserProfile
from .pro_scorer import calculate_pro_chance
from .simple_scorer import calculate_simple_chance

logger = logging.getLogger(__name__)


def calculate_chance(
    profile: UserProfile,
    university: University,
    algorithm: ScoringAlgorithm = ScoringAlgorithm.SIMPLE,
    pro_mode: ProMode = ProMode.DECOUPLED_BUDGET,
) -> ScoringResult:
    """Score a single university with the requested algorithm."""
    if ScoringAlgorithm(algorithm) == ScoringAlgorithm.PRO:
        return calculate_pro_chance(profile, university, pro_mode)
    return calculate_simple_chance(profile, university)


def _country_selected(profile: UserProfile) -> bool:
    country = (profile.country_of_study or "").strip()
    return bool(country) and country.lower() != ANY_COUNTRY


def score_all(
    profile: UserProfile,
    catalog: Iterable[University],
    algorithm: ScoringAlgorithm = ScoringAlgorithm.SIMPLE,
    pro_mode: ProMode = ProMode.DECOUPLED_BUDGET,
) -> List[ScoringResult]:
    """
    Score every university in the catalog.

    If the applicant picked a country of study other than "Any", universities
    in other countries are dropped. Results keep catalog order.
    """
    results = [calculate_chance(profile, uni, algorithm, pro_mode) for uni in catalog]
    for r in results:
        logger.debug(f"{r.university.name}: {r.percentage} ({r.chance_level})")

    if _country_selected(profile):
        results = [r for r in results if r.university.country == profile.country_of_study]

    return results


def sort_by_chance(results: List[ScoringResult]) -> List[ScoringResult]:
    """Descending percentage; ineligible (None) entries go last."""
    return sorted(
        results,
        key=lambda r: (r.percentage is not None, r.percentage or 0),
        reverse=True,
    )


def sort_by_budget(results: List[ScoringResult]) -> List[ScoringResult]:
    """Ascending tuition."""
    return sorted(results, key=lambda r: r.university.requirements.tuition_usd)
