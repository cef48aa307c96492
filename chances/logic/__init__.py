"""
Chance Logic Module

Provides the deterministic admission-chance scoring engine.
"""

from .contracts import (
    UserProfile,
    University,
    UniversityRequirements,
    ScoringResult,
    MatchDetails,
    ImprovementSuggestion,
    ChanceReport,
)
from .engine import ChanceEngine
from .aggregator import calculate_chance, score_all, sort_by_chance, sort_by_budget
from .catalog import load_catalog, build_catalog
from .constants import ChanceLevel, ScoringAlgorithm, ProMode

__all__ = [
    # Main engine
    "ChanceEngine",
    "calculate_chance",
    "score_all",
    "sort_by_chance",
    "sort_by_budget",

    # Catalog
    "load_catalog",
    "build_catalog",

    # Contracts
    "UserProfile",
    "University",
    "UniversityRequirements",
    "ScoringResult",
    "MatchDetails",
    "ImprovementSuggestion",
    "ChanceReport",

    # Enums
    "ChanceLevel",
    "ScoringAlgorithm",
    "ProMode",
]
