"""
Tests for the catalog adapter (row transform + JSON loading).
"""

import json
from pathlib import Path

import pytest

from chances.logic.catalog import build_catalog, find_university, load_catalog, university_from_row

BUNDLED_CATALOG = Path(__file__).resolve().parents[1] / "data" / "universities.json"

FLAT_ROW = {
    "id": 42,
    "name": "Corvinus University of Budapest",
    "country": "Hungary",
    "city": "Budapest",
    "level": "Master",
    "disciplines": ["Finance", "Business"],
    "qs_ranking": "751",
    "min_gpa": "3.0",
    "english_required": True,
    "accepted_english_tests": ["IELTS", "TOEFL"],
    "min_ielts": 6.5,
    "min_toefl": 0,
    "min_duolingo": None,
    "gre_required": False,
    "gmat_required": False,
    "tuition_usd": "7000",
    "scholarship_available": True,
}


def test_flat_row():
    uni = university_from_row(FLAT_ROW)

    assert uni.id == "42"
    assert uni.qs_ranking == 751
    assert uni.disciplines == ["Finance", "Business"]
    assert uni.requirements.min_gpa == 3.0
    assert uni.requirements.min_ielts == 6.5
    assert uni.requirements.min_toefl is None
    assert uni.requirements.min_duolingo is None
    assert uni.requirements.tuition_usd == 7000
    assert uni.requirements.scholarship_available


def test_flat_row_with_formatted_amounts():
    uni = university_from_row({"id": 1, "name": "X", "tuition_usd": "25,000", "min_toefl": "1,0"})
    assert uni.requirements.tuition_usd == 25000
    assert uni.requirements.min_toefl == 1.0


def test_flat_row_with_single_discipline_string():
    uni = university_from_row({"id": "x", "name": "X", "disciplines": "IT", "min_gpa": None})
    assert uni.disciplines == ["IT"]
    assert uni.requirements.min_gpa is None
    assert uni.requirements.tuition_usd == 0.0


def test_nested_row():
    uni = university_from_row({
        "id": 7,
        "name": "KAIST",
        "country": "Korea",
        "level": "Master",
        "disciplines": ["IT"],
        "requirements": {"min_gpa": 3.5, "gre_required": True, "min_gre_quant": 160},
    })

    assert uni.id == "7"
    assert uni.requirements.gre_required
    assert uni.requirements.min_gre_quant == 160


def test_bad_rows_are_skipped():
    rows = [FLAT_ROW, {"name": "No id"}, "not a row", {"id": 1, "name": None}]
    catalog = build_catalog(rows)

    assert [u.id for u in catalog] == ["42", "1"]
    assert isinstance(catalog, tuple)


def test_load_catalog(tmp_path):
    path = tmp_path / "universities.json"
    path.write_text(json.dumps([FLAT_ROW]), encoding="utf-8")

    catalog = load_catalog(path)
    assert len(catalog) == 1
    assert find_university(catalog, "42").name == "Corvinus University of Budapest"
    assert find_university(catalog, "43") is None


def test_load_catalog_requires_an_array(tmp_path):
    path = tmp_path / "universities.json"
    path.write_text(json.dumps({"universities": []}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_catalog(path)


def test_missing_catalog_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.json")


def test_bundled_catalog_loads_completely():
    rows = json.loads(BUNDLED_CATALOG.read_text(encoding="utf-8"))
    catalog = load_catalog(BUNDLED_CATALOG)

    assert len(catalog) == len(rows)
    assert len({u.id for u in catalog}) == len(catalog)
