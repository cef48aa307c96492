"""
Grading Normalizer

Converts the applicant's average from the grading scheme they reported into the
common 4.0 scale used by university requirements.
"""

from typing import Any, Optional

from .constants import GradingScheme
from .parsing import parse_or_zero

GPA_SCALE_MAX = 4.0

# Scale maximum for each supported scheme
SCHEME_MAX = {
    GradingScheme.FIVE_POINT.value: 5.0,
    GradingScheme.FOUR_POINT.value: 4.0,
    GradingScheme.PERCENTAGE.value: 100.0,
}


def normalize_gpa(raw_value: Any, scheme: Optional[str]) -> float:
    """
    Convert a raw grading average to the 4.0 scale.

    Non-numeric or empty input, as well as an unknown scheme, yields 0.0.
    Values outside the scheme's range are clamped to [0, 4].
    """
    scale_max = SCHEME_MAX.get(scheme or "")
    if scale_max is None:
        return 0.0

    value = parse_or_zero(raw_value)
    gpa = value / scale_max * GPA_SCALE_MAX
    return max(0.0, min(GPA_SCALE_MAX, gpa))
