"""
Chance Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for scoring a profile against the catalog.
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from .aggregator import calculate_chance, score_all, sort_by_budget, sort_by_chance
from .catalog import Catalog, find_university
from .constants import ChanceLevel, ProMode, ScoringAlgorithm
from .contracts import ChanceReport, ScoringResult, UserProfile
from .gating import apply_tier_limit, select_algorithm, tier_limit
from .suggestions import explain_pro_gap

logger = logging.getLogger(__name__)

SORTERS = {
    "chance": sort_by_chance,
    "budget": sort_by_budget,
}


class ChanceEngine:
    """
    Scores applicant profiles against an immutable university catalog.

    Pipeline flow:
    1. Algorithm selection - explicit, or derived from the entitlement tier
    2. Scoring - every catalog entry through the Simple or Pro scorer
    3. Country filter - drop universities outside the chosen country
    4. Ordering - by chance or by tuition
    5. Gating - truncate to the number of results the tier may see
    """

    def __init__(
        self,
        catalog: Catalog,
        pro_mode: ProMode = ProMode.DECOUPLED_BUDGET,
        default_algorithm: ScoringAlgorithm = ScoringAlgorithm.SIMPLE,
    ):
        """
        Initialize the chance engine.

        Args:
            catalog: Universities to score against, loaded once by the caller
            pro_mode: Which Pro configuration the engine uses
            default_algorithm: Used when neither an algorithm nor a tier is given
        """
        self.catalog = tuple(catalog)
        self.pro_mode = ProMode(pro_mode)
        self.default_algorithm = ScoringAlgorithm(default_algorithm)

    def evaluate(
        self,
        profile: UserProfile,
        algorithm: Optional[ScoringAlgorithm] = None,
        tier: Optional[str] = None,
        bonus_universities: int = 0,
        sort_by: str = "chance",
    ) -> ChanceReport:
        """
        Score the whole catalog for one profile.

        Args:
            profile: Applicant's questionnaire answers
            algorithm: Force an algorithm; otherwise picked from the tier,
                or the engine default when no tier is given
            tier: Entitlement tier; None means no result limit
            bonus_universities: Extra visible results granted to the user
            sort_by: 'chance' or 'budget'

        Returns:
            ChanceReport with ordered (and possibly truncated) results
        """
        if sort_by not in SORTERS:
            raise ValueError(f"Unknown sort order: {sort_by}")

        start_time = time.perf_counter()
        if algorithm:
            selected = ScoringAlgorithm(algorithm)
        elif tier is not None:
            selected = select_algorithm(tier)
        else:
            selected = self.default_algorithm

        logger.info(f"🎯 Scoring {len(self.catalog)} universities with '{selected.value}' algorithm")
        results = score_all(profile, self.catalog, selected, self.pro_mode)
        ordered = SORTERS[sort_by](results)

        limit = tier_limit(tier, bonus_universities) if tier is not None else None
        visible = apply_tier_limit(ordered, tier, bonus_universities) if tier is not None else ordered

        eligible = [r for r in results if r.chance_level != ChanceLevel.NOT_ELIGIBLE.value]
        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✅ {len(results)} results ({len(eligible)} eligible), showing {len(visible)}")

        return ChanceReport(
            request_id=str(uuid.uuid4()),
            algorithm=selected.value,
            pro_mode=self.pro_mode.value if selected == ScoringAlgorithm.PRO else None,
            results=visible,
            total_evaluated=len(self.catalog),
            total_available=len(results),
            total_eligible=len(eligible),
            visible_limit=limit,
            processing_time_ms=round(processing_time, 2),
            warnings=_generate_warnings(profile, results),
        )

    def score_single(
        self,
        profile: UserProfile,
        university_id: str,
        algorithm: ScoringAlgorithm = ScoringAlgorithm.SIMPLE,
    ) -> Optional[ScoringResult]:
        """
        Score one catalog entry, or None if the id is unknown.
        """
        university = find_university(self.catalog, university_id)
        if university is None:
            return None
        return calculate_chance(profile, university, algorithm, self.pro_mode)

    def compare(self, profile: UserProfile, university_id: str) -> Optional[Dict[str, Any]]:
        """
        Score one university with both algorithms and explain the gap.

        Useful for the upsell view that contrasts the free and paid estimates.
        """
        simple = self.score_single(profile, university_id, ScoringAlgorithm.SIMPLE)
        if simple is None:
            return None
        pro = self.score_single(profile, university_id, ScoringAlgorithm.PRO)

        return {
            "simple": simple,
            "pro": pro,
            "pro_gap_reasons": explain_pro_gap(pro, simple.percentage),
        }


def _generate_warnings(profile: UserProfile, results: List[ScoringResult]) -> List[str]:
    """Generate any warnings for the report."""
    warnings = []

    if not results:
        warnings.append("No universities found matching your criteria. Consider broadening preferences.")

    if not profile.grading_scheme or profile.grading_average in (None, ""):
        warnings.append("Grading average not provided. GPA was scored as the lowest possible value.")

    if not profile.budget:
        warnings.append("Budget not provided. Affordability could not be assessed.")

    if not profile.disciplines:
        warnings.append("No field of study selected. Every university fails the discipline check.")

    return warnings
