"""
Tests for the eligibility gate, English, GRE/GMAT and budget checks.
"""

import pytest

from chances.logic.constants import EligibilityIssue, EnglishStatus, GpaBand
from chances.logic.dimension_scorers import gpa_band, score_budget_coupled, score_english, score_gpa
from chances.logic.explanations import gpa_clause
from chances.logic.requirement_checks import (
    budget_ceiling,
    check_english,
    check_standardized_test,
    eligibility_issue,
    fits_budget,
    level_matches,
    scholarship_bonus_applies,
)

from conftest import make_profile, make_university


# =============================================================================
# ELIGIBILITY GATE
# =============================================================================

def test_program_goal_is_the_target_level():
    uni = make_university(level="Master")
    assert level_matches(make_profile(level="Bachelor", program_goal="Master"), uni)
    assert not level_matches(make_profile(level="Master", program_goal="Bachelor"), uni)


def test_level_falls_back_when_no_program_goal():
    assert level_matches(make_profile(level="Master"), make_university(level="Master"))


def test_level_is_checked_before_discipline():
    uni = make_university(level="Bachelor", disciplines=["IT"])
    assert eligibility_issue(make_profile(), uni) == EligibilityIssue.LEVEL

    uni = make_university(level="Master", disciplines=["IT"])
    assert eligibility_issue(make_profile(), uni) == EligibilityIssue.DISCIPLINE


def test_any_selected_discipline_is_enough():
    uni = make_university(disciplines=["IT"])
    assert eligibility_issue(make_profile(faculty=["Finance", "IT"]), uni) is None


def test_legacy_single_discipline():
    uni = make_university(disciplines=["Business"])
    assert eligibility_issue(make_profile(faculty=[], discipline="Business"), uni) is None


# =============================================================================
# ENGLISH
# =============================================================================

def _english_uni(**overrides):
    requirements = {
        "english_required": True,
        "accepted_english_tests": ["IELTS", "TOEFL"],
        "min_ielts": 6.5,
        "min_toefl": 90,
    }
    requirements.update(overrides)
    return make_university(**requirements)


def test_english_not_required():
    check = check_english(make_profile(english_exam_type="None"), make_university())
    assert check.status == EnglishStatus.NOT_REQUIRED
    assert check.meets


def test_english_statuses():
    uni = _english_uni()
    assert check_english(make_profile(english_score="7.0"), uni).status == EnglishStatus.ABOVE
    assert check_english(make_profile(english_score="6.5"), uni).status == EnglishStatus.EQUAL
    assert check_english(make_profile(english_score="6"), uni).status == EnglishStatus.BELOW


def test_missing_or_unaccepted_test_counts_as_missing():
    uni = _english_uni()
    assert check_english(make_profile(english_exam_type="None"), uni).status == EnglishStatus.MISSING
    assert check_english(make_profile(english_exam_type=None), uni).status == EnglishStatus.MISSING

    duolingo = make_profile(english_exam_type="Duolingo", english_score="130")
    check = check_english(duolingo, uni)
    assert check.status == EnglishStatus.MISSING
    assert not check.meets


def test_per_test_score_is_used_when_overall_missing():
    profile = make_profile(english_exam_type="TOEFL", english_score=None, toefl_total="95")
    assert check_english(profile, _english_uni()).status == EnglishStatus.ABOVE


def test_unparseable_english_score_is_zero():
    check = check_english(make_profile(english_score="seven"), _english_uni())
    assert check.status == EnglishStatus.BELOW
    assert check.score == 0.0


# =============================================================================
# GRE / GMAT
# =============================================================================

GRE_PROFILE = dict(standardized_exam_type="GRE", gre_verbal="155", gre_quant="162", gre_writing="4.0")
GRE_MINIMUMS = dict(gre_required=True, min_gre_verbal=150, min_gre_quant=160, min_gre_writing=3.5)


def test_no_standardized_requirement():
    check = check_standardized_test(make_profile(), make_university())
    assert not check.required
    assert check.meets


def test_gre_requires_every_subscore():
    uni = make_university(**GRE_MINIMUMS)
    assert check_standardized_test(make_profile(**GRE_PROFILE), uni).meets

    weak_writing = make_profile(**{**GRE_PROFILE, "gre_writing": "3.0"})
    check = check_standardized_test(weak_writing, uni)
    assert check.required
    assert not check.meets
    assert check.gre_result is False


def test_gmat_total_against_minimum():
    uni = make_university(gmat_required=True, min_gmat=600)
    assert check_standardized_test(make_profile(standardized_exam_type="GMAT", gmat_total="650"), uni).meets
    assert not check_standardized_test(make_profile(standardized_exam_type="GMAT", gmat_total="590"), uni).meets
    assert not check_standardized_test(make_profile(**GRE_PROFILE), uni).meets


def test_dual_requirement_fails_a_single_exam():
    uni = make_university(gmat_required=True, min_gmat=600, **GRE_MINIMUMS)
    check = check_standardized_test(make_profile(**GRE_PROFILE), uni)
    assert check.gre_result is True
    assert check.gmat_result is False
    assert not check.meets


# =============================================================================
# BUDGET
# =============================================================================

def test_budget_ceiling():
    assert budget_ceiling(make_profile(budget="Up to $5,000")) == 5000
    assert budget_ceiling(make_profile(budget="$20,000+")) == 100000
    assert budget_ceiling(make_profile(budget=None)) is None
    assert budget_ceiling(make_profile(budget="a lot")) is None


def test_fits_budget_without_budget_only_for_free_tuition():
    no_budget = make_profile(budget=None)
    assert not fits_budget(no_budget, make_university(tuition_usd=1000))
    assert fits_budget(no_budget, make_university(tuition_usd=0))


def test_scholarship_bonus_needs_both_sides():
    uni = make_university(scholarship_available=True)
    assert scholarship_bonus_applies(make_profile(finance_source="Mixed"), uni)
    assert not scholarship_bonus_applies(make_profile(finance_source="Self"), uni)
    assert not scholarship_bonus_applies(make_profile(finance_source="Scholarship"), make_university())


# =============================================================================
# POINTS
# =============================================================================

def test_gpa_points_at_boundaries():
    assert score_gpa(3.3, None) == 0
    assert score_gpa(3.9, 3.6) == 20
    assert score_gpa(3.7, 3.6) == 10
    assert score_gpa(3.51, 3.6) == 0
    assert score_gpa(3.3, 3.6) == -10
    assert score_gpa(3.2, 3.6) == -20


def test_coupled_budget_points():
    profile = make_profile(budget="$10,000–$20,000")
    assert score_budget_coupled(profile, make_university(tuition_usd=16000)) == 5
    assert score_budget_coupled(profile, make_university(tuition_usd=18000)) == 3
    assert score_budget_coupled(profile, make_university(tuition_usd=25000)) == -25


def test_gpa_band_drives_points_and_wording():
    assert gpa_band(3.3, 3.6) == GpaBand.SLIGHTLY_BELOW
    assert score_gpa(3.3, 3.6) == -10
    assert gpa_clause(3.3, 3.6) == "Your GPA (3.30) is slightly below the requirement (3.60)"

    assert gpa_band(3.9, 3.6) == GpaBand.WELL_ABOVE
    assert gpa_clause(3.9, 3.6) == "Your GPA (3.90) is well above the requirement (3.60)"
    assert gpa_clause(3.9, None) == "No GPA requirement"


@pytest.mark.parametrize("min_gpa", [None, 2.0, 2.75, 3.0, 3.3, 3.6, 4.0])
def test_higher_gpa_never_scores_lower(min_gpa):
    points = [score_gpa(i / 100, min_gpa) for i in range(401)]
    assert points == sorted(points)


@pytest.mark.parametrize("exam_type, minimum_field, minimum, scores", [
    ("IELTS", "min_ielts", 6.5, [i / 2 for i in range(19)]),
    ("TOEFL", "min_toefl", 90, list(range(0, 121, 5))),
    ("Duolingo", "min_duolingo", 110, list(range(10, 161, 5))),
    ("IELTS", "min_ielts", None, [0, 4.5, 9]),
])
def test_higher_english_score_never_scores_lower(exam_type, minimum_field, minimum, scores):
    uni = make_university(
        english_required=True,
        accepted_english_tests=["IELTS", "TOEFL", "Duolingo"],
        **{minimum_field: minimum},
    )
    points = [
        score_english(check_english(make_profile(english_exam_type=exam_type, english_score=str(s)), uni).status)
        for s in scores
    ]
    assert points == sorted(points)


# =============================================================================
# EXAM TYPE SPELLING
# =============================================================================

def test_exam_types_match_exactly():
    gre_uni = make_university(**GRE_MINIMUMS)
    lower_gre = make_profile(**{**GRE_PROFILE, "standardized_exam_type": "gre"})
    assert not check_standardized_test(lower_gre, gre_uni).meets

    english_uni = _english_uni()
    assert check_english(make_profile(english_exam_type="ielts"), english_uni).status == EnglishStatus.MISSING
