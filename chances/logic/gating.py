"""
Tier Gating

The caller's entitlement tier decides which algorithm scores the catalog and
how many results are shown. The tier itself comes from the entitlement store.
"""

from typing import List, Optional

from .constants import PRO_ALGORITHM_TIERS, TIER_RESULT_LIMITS, ScoringAlgorithm, Tier
from .contracts import ScoringResult


def select_algorithm(tier: Optional[str]) -> ScoringAlgorithm:
    if tier in PRO_ALGORITHM_TIERS:
        return ScoringAlgorithm.PRO
    return ScoringAlgorithm.SIMPLE


def tier_limit(tier: Optional[str], bonus_universities: int = 0) -> Optional[int]:
    """Number of visible results; None means unlimited."""
    known = {t.value for t in Tier}
    if tier not in known:
        tier = Tier.FREE.value

    base = TIER_RESULT_LIMITS.get(tier)
    if base is None:
        return None
    return base + max(0, bonus_universities or 0)


def apply_tier_limit(
    results: List[ScoringResult],
    tier: Optional[str],
    bonus_universities: int = 0,
) -> List[ScoringResult]:
    limit = tier_limit(tier, bonus_universities)
    return results if limit is None else results[:limit]
