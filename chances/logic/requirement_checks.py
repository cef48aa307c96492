"""
Requirement Checkers

Matches the applicant against a university's hard gate (level, discipline),
its English-test requirement, its GRE/GMAT requirement and its tuition.
Pure functions, no scoring: the scorers turn these outcomes into points.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import (
    BUDGET_MAX,
    ENGLISH_TESTS,
    NO_TEST,
    SCHOLARSHIP_FINANCE_SOURCES,
    EligibilityIssue,
    EnglishStatus,
)
from .contracts import University, UserProfile
from .parsing import parse_or_none, parse_or_zero


@dataclass(frozen=True)
class EnglishCheck:
    status: EnglishStatus
    score: Optional[float] = None
    minimum: Optional[float] = None

    @property
    def meets(self) -> bool:
        return self.status in (
            EnglishStatus.ABOVE,
            EnglishStatus.EQUAL,
            EnglishStatus.NOT_REQUIRED,
        )


@dataclass(frozen=True)
class StandardizedTestCheck:
    required: bool
    meets: bool
    gre_result: Optional[bool] = None  # None when GRE is not required
    gmat_result: Optional[bool] = None  # None when GMAT is not required


# =============================================================================
# ELIGIBILITY GATE
# =============================================================================

def level_matches(profile: UserProfile, university: University) -> bool:
    return university.level == profile.target_level


def discipline_matches(profile: UserProfile, university: University) -> bool:
    """True if any discipline the applicant chose is offered."""
    return any(d in university.disciplines for d in profile.disciplines)


def eligibility_issue(profile: UserProfile, university: University) -> Optional[EligibilityIssue]:
    """First failed hard requirement, level before discipline."""
    if not level_matches(profile, university):
        return EligibilityIssue.LEVEL
    if not discipline_matches(profile, university):
        return EligibilityIssue.DISCIPLINE
    return None


# =============================================================================
# ENGLISH
# =============================================================================

def _english_minimum(university: University, exam_type: str) -> float:
    req = university.requirements
    minimums = {
        "IELTS": req.min_ielts,
        "TOEFL": req.min_toefl,
        "Duolingo": req.min_duolingo,
    }
    return minimums.get(exam_type) or 0.0


def _english_score(profile: UserProfile, exam_type: str) -> float:
    """Overall score; older submissions only carry the per-test field."""
    score = parse_or_none(profile.english_score)
    if score is not None:
        return score
    per_test = {
        "IELTS": profile.ielts_overall,
        "TOEFL": profile.toefl_total,
        "Duolingo": profile.duolingo_overall,
    }
    return parse_or_zero(per_test.get(exam_type))


def check_english(profile: UserProfile, university: University) -> EnglishCheck:
    """
    Classify the applicant's English result against the requirement.

    An unaccepted or unknown test type counts as missing.
    """
    req = university.requirements
    if not req.english_required:
        return EnglishCheck(status=EnglishStatus.NOT_REQUIRED)

    exam_type = profile.english_exam_type
    if not exam_type or exam_type == NO_TEST:
        return EnglishCheck(status=EnglishStatus.MISSING)
    if exam_type not in req.accepted_english_tests or exam_type not in ENGLISH_TESTS:
        return EnglishCheck(status=EnglishStatus.MISSING)

    score = _english_score(profile, exam_type)
    minimum = _english_minimum(university, exam_type)

    if score > minimum:
        status = EnglishStatus.ABOVE
    elif score == minimum:
        status = EnglishStatus.EQUAL
    else:
        status = EnglishStatus.BELOW
    return EnglishCheck(status=status, score=score, minimum=minimum)


# =============================================================================
# GRE / GMAT
# =============================================================================

def _gre_compliant(profile: UserProfile, university: University) -> bool:
    req = university.requirements
    verbal = parse_or_zero(profile.gre_verbal)
    quant = parse_or_zero(profile.gre_quant)
    writing = parse_or_zero(profile.gre_writing)
    return (
        verbal >= (req.min_gre_verbal or 0)
        and quant >= (req.min_gre_quant or 0)
        and writing >= (req.min_gre_writing or 0)
    )


def check_standardized_test(profile: UserProfile, university: University) -> StandardizedTestCheck:
    """
    Check GRE and GMAT requirements independently.

    When both are required both must pass, so an applicant who reports a
    single exam always fails the other one.
    """
    req = university.requirements
    if not req.gre_required and not req.gmat_required:
        return StandardizedTestCheck(required=False, meets=True)

    exam_type = profile.standardized_exam_type
    gre_result = None
    gmat_result = None

    if req.gre_required:
        gre_result = exam_type == "GRE" and _gre_compliant(profile, university)

    if req.gmat_required:
        gmat_result = (
            exam_type == "GMAT"
            and parse_or_zero(profile.gmat_total) >= (req.min_gmat or 0)
        )

    meets = gre_result is not False and gmat_result is not False
    return StandardizedTestCheck(
        required=True,
        meets=meets,
        gre_result=gre_result,
        gmat_result=gmat_result,
    )


# =============================================================================
# BUDGET
# =============================================================================

def budget_ceiling(profile: UserProfile) -> Optional[float]:
    """Upper bound of the applicant's budget bracket, None if not given."""
    if not profile.budget:
        return None
    return BUDGET_MAX.get(profile.budget)


def fits_budget(profile: UserProfile, university: University) -> bool:
    return university.requirements.tuition_usd <= (budget_ceiling(profile) or 0)


def scholarship_bonus_applies(profile: UserProfile, university: University) -> bool:
    return (
        university.requirements.scholarship_available
        and profile.finance_source in SCHOLARSHIP_FINANCE_SOURCES
    )
