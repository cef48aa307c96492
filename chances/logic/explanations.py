"""
Explanation Builder

Short human-readable clauses per scoring factor, joined into the sentence
shown under each university.
"""

from typing import List, Optional

from .constants import FinancialStatus, GpaBand
from .dimension_scorers import gpa_band
from .requirement_checks import StandardizedTestCheck

ACADEMIC_ONLY_NOTE = "The percentage reflects academic criteria only."
DIMINISHING_RETURNS_NOTE = "(Pro estimate: adjusted for competition and realism)"
NOT_ELIGIBLE_LEVEL = "This university does not offer the selected level of study."
NOT_ELIGIBLE_DISCIPLINE = "This university does not offer the selected field of study."
NOT_MATCHING_PROGRAM = "This university does not match the selected level or field of study."

GPA_RELATIONS = {
    GpaBand.WELL_ABOVE: "is well above the requirement",
    GpaBand.ABOVE: "is above the minimum",
    GpaBand.AT_MINIMUM: "is at the minimum level",
    GpaBand.SLIGHTLY_BELOW: "is slightly below the requirement",
    GpaBand.WELL_BELOW: "is well below the requirement",
}


def gpa_clause(user_gpa: float, min_gpa: Optional[float]) -> str:
    band = gpa_band(user_gpa, min_gpa)
    if band is None:
        return "No GPA requirement"
    return f"Your GPA ({user_gpa:.2f}) {GPA_RELATIONS[band]} ({min_gpa:.2f})"


def english_clause(english_match: bool) -> str:
    if english_match:
        return "English at the required level"
    return "English does not meet the requirements"


def budget_clause(budget_match: bool, strict: bool = False) -> str:
    if budget_match:
        return "tuition within your budget"
    if strict:
        return "tuition significantly exceeds your budget"
    return "tuition exceeds your budget"


def standardized_clause(check: StandardizedTestCheck) -> Optional[str]:
    if not check.required:
        return None
    if check.meets:
        return "GRE/GMAT results meet the requirements"
    return "higher GRE/GMAT scores are required"


def join_clauses(parts: List[Optional[str]]) -> str:
    """Comma-join the non-empty clauses and end the sentence."""
    return ", ".join(p for p in parts if p) + "."


def affordability_sentence(financial_status: Optional[str]) -> Optional[str]:
    if financial_status is None:
        return None
    if financial_status == FinancialStatus.AFFORDABLE:
        return "Tuition fits your budget."
    return "Tuition is above your budget."
