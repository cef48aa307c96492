"""
Pro Scorer

Additive model like Simple, but positive and negative contributions are kept
apart and only the positive total is dampened once the provisional score is
already high. Strong profiles get compressed, weak profiles are not cushioned.

Two configurations exist:
- decoupled_budget: budget never touches the percentage and is reported as a
  separate affordability status.
- coupled_budget: the earlier variant, budget folded into the score with
  asymmetric weights and a lower ceiling.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    BASE_SCORE,
    MIN_PERCENTAGE,
    ChanceLevel,
    EligibilityIssue,
    FinancialStatus,
    ProMode,
    ScoringAlgorithm,
)
from .contracts import MatchDetails, ScoringResult, University, UserProfile
from .dimension_scorers import (
    gpa_matches,
    score_budget_coupled,
    score_discipline,
    score_english,
    score_gpa,
    score_scholarship,
    score_standardized_test,
)
from .explanations import (
    ACADEMIC_ONLY_NOTE,
    DIMINISHING_RETURNS_NOTE,
    NOT_ELIGIBLE_DISCIPLINE,
    NOT_ELIGIBLE_LEVEL,
    affordability_sentence,
    budget_clause,
    english_clause,
    gpa_clause,
    join_clauses,
    standardized_clause,
)
from .grading import normalize_gpa
from .requirement_checks import (
    budget_ceiling,
    check_english,
    check_standardized_test,
    discipline_matches,
    eligibility_issue,
    fits_budget,
)


@dataclass(frozen=True)
class ProConfig:
    """Knobs that distinguish the two Pro variants."""
    budget_in_score: bool
    # (provisional score threshold, multiplier for the positive total), highest first
    damping_steps: Tuple[Tuple[float, float], ...]
    max_percentage: float
    high_threshold: float
    medium_threshold: float
    round_percentage: bool


PRO_CONFIGS = {
    ProMode.DECOUPLED_BUDGET: ProConfig(
        budget_in_score=False,
        damping_steps=((90, 0.25), (80, 0.50)),
        max_percentage=95,
        high_threshold=60,
        medium_threshold=30,
        round_percentage=False,
    ),
    ProMode.COUPLED_BUDGET: ProConfig(
        budget_in_score=True,
        damping_steps=((85, 0.3), (75, 0.5), (65, 0.7)),
        max_percentage=85,
        high_threshold=65,
        medium_threshold=35,
        round_percentage=True,
    ),
}


def damping_multiplier(provisional_score: float, config: ProConfig) -> float:
    """Multiplier applied to the positive total for a given provisional score."""
    for threshold, multiplier in config.damping_steps:
        if provisional_score >= threshold:
            return multiplier
    return 1.0


def pro_chance_level(percentage: float, config: ProConfig) -> ChanceLevel:
    if percentage >= config.high_threshold:
        return ChanceLevel.HIGH
    if percentage >= config.medium_threshold:
        return ChanceLevel.MEDIUM
    return ChanceLevel.LOW


def financial_status(profile: UserProfile, university: University) -> Optional[FinancialStatus]:
    """Affordability, or None when the applicant gave no usable budget."""
    ceiling = budget_ceiling(profile)
    if ceiling is None:
        return None
    if university.requirements.tuition_usd <= ceiling:
        return FinancialStatus.AFFORDABLE
    return FinancialStatus.NOT_AFFORDABLE


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _not_eligible(university: University, issue: EligibilityIssue, discipline_ok: bool) -> ScoringResult:
    return ScoringResult(
        university=university,
        algorithm=ScoringAlgorithm.PRO.value,
        percentage=None,
        chance_level=ChanceLevel.NOT_ELIGIBLE.value,
        explanation=NOT_ELIGIBLE_LEVEL if issue == EligibilityIssue.LEVEL else NOT_ELIGIBLE_DISCIPLINE,
        match_details=MatchDetails(discipline_match=discipline_ok),
        eligibility_issue=issue.value,
        financial_status=None,
    )


def calculate_pro_chance(
    profile: UserProfile,
    university: University,
    mode: ProMode = ProMode.DECOUPLED_BUDGET,
) -> ScoringResult:
    """
    Score one university with the Pro algorithm.

    Ineligible entries get a None percentage and no financial status.
    """
    config = PRO_CONFIGS[ProMode(mode)]
    discipline_ok = discipline_matches(profile, university)

    issue = eligibility_issue(profile, university)
    if issue is not None:
        return _not_eligible(university, issue, discipline_ok)

    user_gpa = normalize_gpa(profile.grading_average, profile.grading_scheme)
    min_gpa = university.requirements.min_gpa
    english = check_english(profile, university)
    standardized = check_standardized_test(profile, university)
    budget_match = fits_budget(profile, university)

    contributions = [
        score_gpa(user_gpa, min_gpa),
        score_english(english.status),
        score_standardized_test(standardized),
        score_discipline(discipline_ok),
        score_scholarship(profile, university),
    ]
    if config.budget_in_score:
        contributions.append(score_budget_coupled(profile, university))

    positive = sum(points for points in contributions if points > 0)
    negative = sum(points for points in contributions if points < 0)

    provisional = BASE_SCORE + positive + negative
    multiplier = damping_multiplier(provisional, config)
    final_score = BASE_SCORE + positive * multiplier + negative

    if config.round_percentage:
        final_score = _round_half_up(final_score)
    percentage = max(MIN_PERCENTAGE, min(config.max_percentage, final_score))

    status = financial_status(profile, university)
    damped = multiplier < 1.0

    clauses = [
        gpa_clause(user_gpa, min_gpa),
        english_clause(english.meets),
    ]
    if config.budget_in_score:
        clauses.append(budget_clause(budget_match, strict=True))
    clauses.append(standardized_clause(standardized))

    explanation = join_clauses(clauses)
    if not config.budget_in_score:
        explanation += " " + ACADEMIC_ONLY_NOTE
        affordability = affordability_sentence(status)
        if affordability:
            explanation += " " + affordability
    if damped:
        explanation += " " + DIMINISHING_RETURNS_NOTE

    return ScoringResult(
        university=university,
        algorithm=ScoringAlgorithm.PRO.value,
        percentage=percentage,
        chance_level=pro_chance_level(percentage, config).value,
        explanation=explanation,
        match_details=MatchDetails(
            gpa_match=gpa_matches(user_gpa, min_gpa),
            english_match=english.meets,
            budget_match=budget_match,
            discipline_match=discipline_ok,
            standardized_test_match=standardized.meets,
        ),
        eligibility_issue=None,
        financial_status=status.value if status else None,
        diminishing_returns_applied=damped,
    )
