"""
Improvement Suggestions

Turns failed match flags into prioritized tips, and explains why the Pro
estimate came out lower than the Simple one.
"""

from typing import List, Optional

from .constants import MAX_SUGGESTIONS, PRO_GAP_SOFT_CAP_THRESHOLD
from .contracts import ImprovementSuggestion, ScoringResult

PRIORITY_ORDER = ("high", "medium", "low")

SUGGESTION_MAP = {
    "gpa_match": ImprovementSuggestion(
        area="Academic Performance",
        suggestion="Take preparatory courses or additional certifications to strengthen your academic profile",
        priority="high",
    ),
    "english_match": ImprovementSuggestion(
        area="Language Proficiency",
        suggestion="Targeted IELTS/TOEFL preparation to score above the minimum, not at the border",
        priority="high",
    ),
    "standardized_test_match": ImprovementSuggestion(
        area="Standardized Tests",
        suggestion="Take the GRE/GMAT: many programs treat it as a mandatory requirement",
        priority="high",
    ),
    "budget_match": ImprovementSuggestion(
        area="Funding",
        suggestion="Look into scholarships and grants to reduce the financial load",
        priority="medium",
    ),
}

BASE_SUGGESTIONS = [
    ImprovementSuggestion(
        area="Alternative Programs",
        suggestion="Explore similar fields of study with softer requirements",
        priority="low",
    ),
    ImprovementSuggestion(
        area="Deadlines",
        suggestion="Check application deadlines: early admission can improve your chances",
        priority="low",
    ),
]

# Listed in the order the breakdown shows them
PRO_GAP_REASONS = {
    "gpa_match": "GPA is at or below the minimum; admission committees look at this critically",
    "english_match": "English has no margin; any drop in score may be critical",
    "budget_match": "Tuition is outside your budget; the Pro estimate treats this more strictly",
    "standardized_test_match": "Required GRE/GMAT scores are missing; many programs treat them as mandatory",
}
SOFT_CAP_REASON = "A soft cap was applied to strong base indicators to account for real competition"


def _failed_flags(result: ScoringResult, flags) -> List[str]:
    details = result.match_details
    return [flag for flag in flags if not getattr(details, flag)]


def build_suggestions(result: ScoringResult, limit: int = MAX_SUGGESTIONS) -> List[ImprovementSuggestion]:
    """High-priority tips first, then medium, then the general tips everyone gets."""
    tips = [SUGGESTION_MAP[flag] for flag in _failed_flags(result, SUGGESTION_MAP)] + BASE_SUGGESTIONS
    tips.sort(key=lambda tip: PRIORITY_ORDER.index(tip.priority))
    return tips[:limit]


def explain_pro_gap(pro_result: ScoringResult, simple_percentage: Optional[float]) -> List[str]:
    """
    Reasons why the Pro percentage is below the Simple one.

    Empty when Pro is not lower or could not be scored.
    """
    if pro_result.percentage is None or simple_percentage is None:
        return []

    difference = simple_percentage - pro_result.percentage
    if difference <= 0:
        return []

    reasons = []
    if difference >= PRO_GAP_SOFT_CAP_THRESHOLD:
        reasons.append(SOFT_CAP_REASON)
    reasons.extend(PRO_GAP_REASONS[flag] for flag in _failed_flags(pro_result, PRO_GAP_REASONS))
    return reasons
