"""
Simple Scorer

Flat additive point model: base 50, plus or minus a fixed number of points per
factor, clamped to [5, 95].
"""

from .constants import (
    BASE_SCORE,
    MAX_PERCENTAGE,
    MIN_PERCENTAGE,
    SIMPLE_HIGH_THRESHOLD,
    SIMPLE_MEDIUM_THRESHOLD,
    ChanceLevel,
    ScoringAlgorithm,
)
from .contracts import MatchDetails, ScoringResult, University, UserProfile
from .dimension_scorers import (
    gpa_matches,
    score_budget,
    score_discipline,
    score_english,
    score_gpa,
    score_scholarship,
    score_standardized_test,
)
from .explanations import (
    NOT_MATCHING_PROGRAM,
    budget_clause,
    english_clause,
    gpa_clause,
    join_clauses,
    standardized_clause,
)
from .grading import normalize_gpa
from .requirement_checks import (
    check_english,
    check_standardized_test,
    discipline_matches,
    fits_budget,
    level_matches,
)


def simple_chance_level(percentage: float) -> ChanceLevel:
    if percentage >= SIMPLE_HIGH_THRESHOLD:
        return ChanceLevel.HIGH
    if percentage >= SIMPLE_MEDIUM_THRESHOLD:
        return ChanceLevel.MEDIUM
    return ChanceLevel.LOW


def calculate_simple_chance(profile: UserProfile, university: University) -> ScoringResult:
    """
    Score one university with the Simple algorithm.

    A level or discipline mismatch short-circuits to the fixed low result.
    """
    level_ok = level_matches(profile, university)
    discipline_ok = discipline_matches(profile, university)

    if not level_ok or not discipline_ok:
        return ScoringResult(
            university=university,
            algorithm=ScoringAlgorithm.SIMPLE.value,
            percentage=MIN_PERCENTAGE,
            chance_level=ChanceLevel.LOW.value,
            explanation=NOT_MATCHING_PROGRAM,
            match_details=MatchDetails(discipline_match=discipline_ok),
        )

    score = BASE_SCORE

    # 1. GPA
    user_gpa = normalize_gpa(profile.grading_average, profile.grading_scheme)
    min_gpa = university.requirements.min_gpa
    score += score_gpa(user_gpa, min_gpa)

    # 2. English
    english = check_english(profile, university)
    score += score_english(english.status)

    # 3. GRE / GMAT
    standardized = check_standardized_test(profile, university)
    score += score_standardized_test(standardized)

    # 4. Budget
    budget_match = fits_budget(profile, university)
    score += score_budget(budget_match)

    # 5. Discipline (always a match past the gate)
    score += score_discipline(discipline_ok)

    # 6. Scholarship
    score += score_scholarship(profile, university)

    percentage = max(MIN_PERCENTAGE, min(MAX_PERCENTAGE, score))

    explanation = join_clauses([
        gpa_clause(user_gpa, min_gpa),
        english_clause(english.meets),
        budget_clause(budget_match),
        standardized_clause(standardized),
    ])

    return ScoringResult(
        university=university,
        algorithm=ScoringAlgorithm.SIMPLE.value,
        percentage=percentage,
        chance_level=simple_chance_level(percentage).value,
        explanation=explanation,
        match_details=MatchDetails(
            gpa_match=gpa_matches(user_gpa, min_gpa),
            english_match=english.meets,
            budget_match=budget_match,
            discipline_match=discipline_ok,
            standardized_test_match=standardized.meets,
        ),
    )
