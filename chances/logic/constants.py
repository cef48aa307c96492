"""
Scoring Engine Constants

Defines all point weights, thresholds, budget brackets and enums used by the
chance scorers. All values are hand-tuned and deterministic.
"""

from enum import Enum
from typing import Dict, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class ChanceLevel(str, Enum):
    """Coarse chance bucket shown next to each university."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    NOT_ELIGIBLE = "NotEligible"


class ScoringAlgorithm(str, Enum):
    SIMPLE = "simple"
    PRO = "pro"


class ProMode(str, Enum):
    """Alternate configurations of the Pro scorer."""
    DECOUPLED_BUDGET = "decoupled_budget"  # budget reported separately
    COUPLED_BUDGET = "coupled_budget"      # budget folded into the score


class GpaBand(str, Enum):
    """Applicant GPA relative to the university minimum."""
    WELL_ABOVE = "well_above"
    ABOVE = "above"
    AT_MINIMUM = "at_minimum"
    SLIGHTLY_BELOW = "slightly_below"
    WELL_BELOW = "well_below"


class EnglishStatus(str, Enum):
    ABOVE = "above"
    EQUAL = "equal"
    BELOW = "below"
    MISSING = "missing"
    NOT_REQUIRED = "not_required"


class EligibilityIssue(str, Enum):
    LEVEL = "level"
    DISCIPLINE = "discipline"


class FinancialStatus(str, Enum):
    AFFORDABLE = "Affordable"
    NOT_AFFORDABLE = "Not Affordable"


class GradingScheme(str, Enum):
    FIVE_POINT = "5-point"
    FOUR_POINT = "4-point"
    PERCENTAGE = "Percentage"


class Tier(str, Enum):
    """Paid entitlement tiers."""
    FREE = "free"
    PRO_LITE = "pro_lite"
    PRO = "pro"
    PRO_PLUS = "pro_plus"


# =============================================================================
# PROFILE VOCABULARY
# =============================================================================

ENGLISH_TESTS = ("IELTS", "TOEFL", "Duolingo")
NO_TEST = "None"
ANY_COUNTRY = "any"

SCHOLARSHIP_FINANCE_SOURCES = ("Scholarship", "Mixed")

# Upper bound of each budget bracket offered in the questionnaire (USD/year)
BUDGET_MAX: Dict[str, float] = {
    "Up to $5,000": 5000,
    "$5,000–$10,000": 10000,
    "$10,000–$20,000": 20000,
    "$20,000+": 100000,
}

# =============================================================================
# POINT WEIGHTS
# =============================================================================

BASE_SCORE = 50

# (minimum GPA difference, band), checked top to bottom; anything lower is WELL_BELOW
GPA_DIFF_BANDS: Tuple[Tuple[float, GpaBand], ...] = (
    (0.3, GpaBand.WELL_ABOVE),
    (0.1, GpaBand.ABOVE),
    (-0.09, GpaBand.AT_MINIMUM),
    (-0.3, GpaBand.SLIGHTLY_BELOW),
)

GPA_BAND_POINTS: Dict[GpaBand, int] = {
    GpaBand.WELL_ABOVE: 20,
    GpaBand.ABOVE: 10,
    GpaBand.AT_MINIMUM: 0,
    GpaBand.SLIGHTLY_BELOW: -10,
    GpaBand.WELL_BELOW: -20,
}

ENGLISH_POINTS: Dict[EnglishStatus, int] = {
    EnglishStatus.ABOVE: 20,
    EnglishStatus.EQUAL: 10,
    EnglishStatus.BELOW: -15,
    EnglishStatus.MISSING: -20,
    EnglishStatus.NOT_REQUIRED: 0,
}

STANDARDIZED_TEST_POINTS = 15
BUDGET_POINTS = 15
DISCIPLINE_POINTS = 10
SCHOLARSHIP_BONUS = 5

# Earlier Pro variant: budget folded into the score
COUPLED_BUDGET_COMFORT_RATIO = 0.8
COUPLED_BUDGET_COMFORT_POINTS = 5
COUPLED_BUDGET_FITS_POINTS = 3
COUPLED_BUDGET_OVER_POINTS = -25

# =============================================================================
# CLAMPS & TIER THRESHOLDS
# =============================================================================

MIN_PERCENTAGE = 5
MAX_PERCENTAGE = 95

SIMPLE_HIGH_THRESHOLD = 70
SIMPLE_MEDIUM_THRESHOLD = 40

# =============================================================================
# TIER GATING
# =============================================================================

TIER_RESULT_LIMITS: Dict[str, int] = {
    Tier.FREE.value: 3,
    Tier.PRO_LITE.value: 6,
}

PRO_ALGORITHM_TIERS = (Tier.PRO_LITE.value, Tier.PRO.value, Tier.PRO_PLUS.value)

MAX_SUGGESTIONS = 5
PRO_GAP_SOFT_CAP_THRESHOLD = 20

ENGINE_VERSION = "1.0.0"
