"""
Numeric Parsing

Every numeric answer in a profile goes through these helpers, so malformed
input degrades the same way everywhere: unparseable -> 0 (or None).
"""

import math
import re
from decimal import Decimal
from typing import Any, Optional

THOUSANDS_GROUP = re.compile(r"\d{3}")


def _normalize_separators(text: str) -> str:
    """
    Decimal comma ("6,5") becomes a dot; thousands separators ("25,000",
    "1,250.50") are dropped.
    """
    if "," not in text:
        return text
    _, _, tail = text.partition(",")
    if text.count(",") == 1 and "." not in text and not THOUSANDS_GROUP.fullmatch(tail):
        return text.replace(",", ".")
    return text.replace(",", "")


def parse_or_none(value: Any) -> Optional[float]:
    """Parse a questionnaire answer into a float, or None if it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = _normalize_separators(value.strip())
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_or_zero(value: Any) -> float:
    """Parse a questionnaire answer into a float; anything unparseable is 0."""
    number = parse_or_none(value)
    return 0.0 if number is None else number
