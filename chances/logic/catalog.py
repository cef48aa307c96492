"""
Catalog Adapter

Reads the static university catalog and transforms database-style rows into
immutable University records for the scoring engine.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO writes
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pydantic import ValidationError

from .contracts import University, UniversityRequirements
from .parsing import parse_or_none

logger = logging.getLogger(__name__)

Catalog = Tuple[University, ...]

# Flat row columns whose falsy values mean "no requirement"
OPTIONAL_MINIMUM_COLUMNS = (
    "min_ielts",
    "min_toefl",
    "min_duolingo",
    "min_gre_verbal",
    "min_gre_quant",
    "min_gre_writing",
    "min_gmat",
)


def _optional_minimum(value: Any) -> Optional[float]:
    number = parse_or_none(value)
    return number if number else None


def _as_list(value: Any) -> list:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [str(value).strip()]


def requirements_from_row(row: Dict[str, Any]) -> UniversityRequirements:
    """Build requirements from a flat catalog row (one column per requirement)."""
    minimums = {column: _optional_minimum(row.get(column)) for column in OPTIONAL_MINIMUM_COLUMNS}

    return UniversityRequirements(
        min_gpa=parse_or_none(row.get("min_gpa")),
        accepts_grading_schemes=_as_list(row.get("accepts_grading_schemes")),
        english_required=bool(row.get("english_required")),
        accepted_english_tests=_as_list(row.get("accepted_english_tests")),
        gre_required=bool(row.get("gre_required")),
        gmat_required=bool(row.get("gmat_required")),
        tuition_usd=parse_or_none(row.get("tuition_usd")) or 0.0,
        scholarship_available=bool(row.get("scholarship_available")),
        **minimums,
    )


def university_from_row(row: Dict[str, Any]) -> University:
    """
    Convert one catalog row to a University.

    Accepts either a nested ``requirements`` object or the flat column layout.
    """
    if isinstance(row.get("requirements"), dict):
        return University(**{**row, "id": str(row["id"])})

    ranking = parse_or_none(row.get("qs_ranking"))
    return University(
        id=str(row["id"]),
        name=row.get("name") or "",
        country=row.get("country") or "",
        city=row.get("city") or "",
        level=row.get("level") or "",
        disciplines=_as_list(row.get("disciplines")),
        qs_ranking=int(ranking) if ranking else None,
        requirements=requirements_from_row(row),
    )


def build_catalog(rows: Iterable[Dict[str, Any]]) -> Catalog:
    """Transform rows, skipping the ones that cannot be converted."""
    universities = []
    for index, row in enumerate(rows):
        try:
            universities.append(university_from_row(row))
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Skipping catalog row {index} ({row.get('id') if isinstance(row, dict) else row!r}): {e}")
            continue
    return tuple(universities)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load the catalog JSON file once; a missing file raises."""
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        rows = json.load(fh)

    if not isinstance(rows, list):
        raise ValueError(f"Catalog {path} must contain a JSON array of universities")

    catalog = build_catalog(rows)
    logger.info(f"📚 Loaded {len(catalog)} universities from {path}")
    return catalog


def find_university(catalog: Catalog, university_id: str) -> Optional[University]:
    return next((u for u in catalog if u.id == university_id), None)
