"""
Data Contracts for the Chance Scoring Engine

Defines Pydantic models for UserProfile (input), University (catalog entry)
and ScoringResult / ChanceReport (output).
These contracts are the API boundary for the scoring engine.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field

from .constants import ENGINE_VERSION


# Raw numeric answers arrive from the questionnaire as strings, sometimes as
# numbers. They are parsed permissively at use, never at construction.
RawNumber = Optional[Union[str, float]]


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class UserProfile(BaseModel):
    """
    Input contract for the scoring engine.
    The applicant's self-reported answers from the questionnaire.
    """
    # Step 1 - Basic information
    nationality: Optional[str] = None
    country_of_study: Optional[str] = None  # "Any" disables the country filter
    level: str = ""  # current education; older submissions stored the target here
    grading_scheme: Optional[str] = None  # 5-point / 4-point / Percentage
    grading_average: RawNumber = None
    finance_source: Optional[str] = None  # Self / Family / Scholarship / Mixed
    budget: Optional[str] = None  # one of BUDGET_MAX keys

    # Step 2 - English exams
    english_exam_type: Optional[str] = None  # IELTS / TOEFL / Duolingo / None
    english_score: RawNumber = None
    ielts_overall: RawNumber = None
    toefl_total: RawNumber = None
    duolingo_overall: RawNumber = None

    # Step 2 - Standardized tests
    standardized_exam_type: Optional[str] = None  # GRE / GMAT / None
    gre_verbal: RawNumber = None
    gre_quant: RawNumber = None
    gre_writing: RawNumber = None
    gmat_total: RawNumber = None
    gmat_quant: RawNumber = None
    gmat_verbal: RawNumber = None

    # Step 3 - Field of study
    program_goal: Optional[str] = None  # target level: Bachelor / Master / Foundation
    faculty: List[str] = Field(default_factory=list)
    scholarship: Optional[str] = None
    discipline: Optional[str] = None  # legacy single-choice answer

    class Config:
        frozen = True

    @property
    def target_level(self) -> str:
        return self.program_goal or self.level

    @property
    def disciplines(self) -> List[str]:
        """Chosen disciplines, falling back to the legacy single answer."""
        if self.faculty:
            return list(self.faculty)
        return [self.discipline] if self.discipline else []


class UniversityRequirements(BaseModel):
    """Admission requirements. A None minimum means no requirement."""
    # Academic
    min_gpa: Optional[float] = None  # 4.0 scale
    accepts_grading_schemes: List[str] = Field(default_factory=list)

    # English tests
    english_required: bool = False
    accepted_english_tests: List[str] = Field(default_factory=list)
    min_ielts: Optional[float] = None
    min_toefl: Optional[float] = None
    min_duolingo: Optional[float] = None

    # Standardized tests
    gre_required: bool = False
    min_gre_verbal: Optional[float] = None
    min_gre_quant: Optional[float] = None
    min_gre_writing: Optional[float] = None
    gmat_required: bool = False
    min_gmat: Optional[float] = None

    # Financial
    tuition_usd: float = 0.0
    scholarship_available: bool = False

    class Config:
        frozen = True


class University(BaseModel):
    """Static catalog entry."""
    id: str
    name: str
    country: str = ""
    city: str = ""
    level: str = ""
    disciplines: List[str] = Field(default_factory=list)
    qs_ranking: Optional[int] = None
    requirements: UniversityRequirements = Field(default_factory=UniversityRequirements)

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class MatchDetails(BaseModel):
    """Independent pass/fail flags, one per scoring factor."""
    gpa_match: bool = False
    english_match: bool = False
    budget_match: bool = False
    discipline_match: bool = False
    standardized_test_match: bool = False

    class Config:
        frozen = True


class ScoringResult(BaseModel):
    """
    Output per university.
    percentage is None only for Pro entries that fail the eligibility gate.
    """
    university: University
    algorithm: str
    percentage: Optional[float] = Field(default=None, ge=5, le=95)
    chance_level: str
    explanation: str = ""
    match_details: MatchDetails = Field(default_factory=MatchDetails)

    # Pro only
    eligibility_issue: Optional[str] = None  # level / discipline
    financial_status: Optional[str] = None  # Affordable / Not Affordable
    diminishing_returns_applied: bool = False

    class Config:
        frozen = True
        use_enum_values = True


class ImprovementSuggestion(BaseModel):
    """Actionable tip derived from failed match flags."""
    area: str
    suggestion: str
    priority: str  # high/medium/low


class ChanceReport(BaseModel):
    """
    Output contract for the chance engine.
    Contains ordered results with summary statistics.
    """
    request_id: Optional[str] = None
    algorithm: str
    pro_mode: Optional[str] = None

    results: List[ScoringResult] = Field(default_factory=list)

    # Summary Statistics
    total_evaluated: int = 0
    total_available: int = 0
    total_eligible: int = 0
    visible_limit: Optional[int] = None

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)
