"""
GRE and GMAT score to percentile tables, based on official ETS and GMAC data.

The percentiles are informational: they are shown next to the applicant's
subscores and do not feed into the chance percentage.
"""

from typing import Any, Dict, Optional, Tuple

from .contracts import UserProfile
from .parsing import parse_or_none

PercentileTable = Tuple[Tuple[float, int], ...]

# GRE Verbal Reasoning (130-170)
GRE_VERBAL_TABLE: PercentileTable = (
    (170, 99), (169, 99), (168, 98), (167, 98), (166, 97), (165, 96),
    (164, 94), (163, 93), (162, 91), (161, 89), (160, 86), (159, 84),
    (158, 81), (157, 78), (156, 75), (155, 71), (154, 67), (153, 63),
    (152, 59), (151, 55), (150, 50), (149, 46), (148, 42), (147, 38),
    (146, 34), (145, 30), (144, 27), (143, 24), (142, 21), (141, 18),
    (140, 16), (139, 14), (138, 12), (137, 10), (136, 9), (135, 7),
    (134, 6), (133, 5), (132, 4), (131, 3), (130, 2),
)

# GRE Quantitative Reasoning (130-170)
GRE_QUANT_TABLE: PercentileTable = (
    (170, 96), (169, 93), (168, 90), (167, 86), (166, 82), (165, 78),
    (164, 74), (163, 70), (162, 66), (161, 61), (160, 57), (159, 53),
    (158, 49), (157, 45), (156, 42), (155, 38), (154, 35), (153, 32),
    (152, 29), (151, 26), (150, 24), (149, 21), (148, 19), (147, 17),
    (146, 16), (145, 14), (144, 12), (143, 11), (142, 10), (141, 9),
    (140, 8), (139, 7), (138, 6), (137, 5), (136, 5), (135, 4),
    (134, 3), (133, 3), (132, 2), (131, 2), (130, 1),
)

# GRE Analytical Writing (0.0-6.0, step 0.5)
GRE_WRITING_TABLE: PercentileTable = (
    (6.0, 99), (5.5, 98), (5.0, 93), (4.5, 82), (4.0, 60), (3.5, 42),
    (3.0, 18), (2.5, 8), (2.0, 2), (1.5, 1), (1.0, 0), (0.5, 0), (0.0, 0),
)

# GMAT Focus Quantitative Reasoning (60-90)
GMAT_QUANT_TABLE: PercentileTable = (
    (90, 97), (89, 94), (88, 91), (87, 88), (86, 85), (85, 82),
    (84, 78), (83, 75), (82, 71), (81, 67), (80, 63), (79, 59),
    (78, 55), (77, 51), (76, 47), (75, 43), (74, 40), (73, 36),
    (72, 33), (71, 30), (70, 27), (69, 24), (68, 21), (67, 19),
    (66, 17), (65, 15), (64, 13), (63, 11), (62, 9), (61, 8), (60, 6),
)

# GMAT Focus Verbal Reasoning (60-90)
GMAT_VERBAL_TABLE: PercentileTable = (
    (90, 99), (89, 99), (88, 98), (87, 97), (86, 96), (85, 95),
    (84, 93), (83, 91), (82, 89), (81, 87), (80, 84), (79, 81),
    (78, 78), (77, 75), (76, 71), (75, 68), (74, 64), (73, 60),
    (72, 56), (71, 52), (70, 48), (69, 44), (68, 40), (67, 36),
    (66, 33), (65, 29), (64, 26), (63, 23), (62, 20), (61, 17), (60, 14),
)


def lookup_percentile(table: PercentileTable, score: Any) -> Optional[int]:
    """
    Lookup percentile for a given score.

    - Exact match if the score is tabulated
    - Otherwise the percentile of the nearest lower tabulated score
    - Scores below the table minimum get the minimum's percentile

    Returns None for empty or non-numeric input.
    """
    value = parse_or_none(score)
    if value is None or not table:
        return None

    for entry_score, percentile in table:
        if entry_score == value:
            return percentile

    ordered = sorted(table, key=lambda entry: entry[0], reverse=True)
    for entry_score, percentile in ordered:
        if entry_score <= value:
            return percentile

    return ordered[-1][1]


def profile_percentiles(profile: UserProfile) -> Dict[str, Optional[int]]:
    """Percentiles for the subscores of the standardized exam the applicant declared."""
    exam = profile.standardized_exam_type

    if exam == "GRE":
        return {
            "gre_verbal": lookup_percentile(GRE_VERBAL_TABLE, profile.gre_verbal),
            "gre_quant": lookup_percentile(GRE_QUANT_TABLE, profile.gre_quant),
            "gre_writing": lookup_percentile(GRE_WRITING_TABLE, profile.gre_writing),
        }
    if exam == "GMAT":
        return {
            "gmat_quant": lookup_percentile(GMAT_QUANT_TABLE, profile.gmat_quant),
            "gmat_verbal": lookup_percentile(GMAT_VERBAL_TABLE, profile.gmat_verbal),
        }
    return {}
