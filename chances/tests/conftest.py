"""
Shared builders for the chance engine tests.
"""

import pytest

from chances.logic.contracts import University, UniversityRequirements, UserProfile


def make_university(
    id="u1",
    name="Test University",
    country="Poland",
    level="Master",
    disciplines=("Finance",),
    **requirements,
):
    return University(
        id=id,
        name=name,
        country=country,
        city="Test City",
        level=level,
        disciplines=list(disciplines),
        requirements=UniversityRequirements(**requirements),
    )


def make_profile(**overrides):
    answers = {
        "country_of_study": "Any",
        "level": "Master",
        "grading_scheme": "4-point",
        "grading_average": "3.0",
        "finance_source": "Self",
        "budget": "$10,000–$20,000",
        "english_exam_type": "IELTS",
        "english_score": "6.5",
        "standardized_exam_type": "None",
        "faculty": ["Finance"],
    }
    answers.update(overrides)
    return UserProfile(**answers)


@pytest.fixture
def typical_university():
    """Master's in Finance, GPA 3.0, IELTS 6.5, $10k tuition."""
    return make_university(
        min_gpa=3.0,
        english_required=True,
        accepted_english_tests=["IELTS", "TOEFL"],
        min_ielts=6.5,
        min_toefl=90,
        tuition_usd=10000,
    )


@pytest.fixture
def typical_profile():
    return make_profile()


def profile_grid():
    """Spread of applicants from empty answers to very strong ones."""
    grid = []
    for average in ("", "1.5", "3.0", "3.6", "4.0"):
        for english in (("None", None), ("IELTS", "5.0"), ("IELTS", "8.5"), ("TOEFL", "110")):
            for budget in (None, "Up to $5,000", "$20,000+"):
                for exam in ({}, {"standardized_exam_type": "GRE", "gre_verbal": "168", "gre_quant": "168", "gre_writing": "5.5"}):
                    for finance in ("Self", "Scholarship"):
                        grid.append(make_profile(
                            grading_average=average,
                            english_exam_type=english[0],
                            english_score=english[1],
                            budget=budget,
                            finance_source=finance,
                            **exam,
                        ))
    return grid


def university_grid():
    return [
        make_university(id="open"),
        make_university(id="strict", min_gpa=3.8, english_required=True, accepted_english_tests=["IELTS"],
                        min_ielts=7.5, gre_required=True, min_gre_quant=165, tuition_usd=60000),
        make_university(id="friendly", min_gpa=2.0, english_required=True, accepted_english_tests=["IELTS", "TOEFL"],
                        min_ielts=5.5, min_toefl=70, tuition_usd=3000, scholarship_available=True),
        make_university(id="gre", min_gpa=3.0, gre_required=True, min_gre_verbal=150, min_gre_quant=150,
                        min_gre_writing=3.0, tuition_usd=15000, scholarship_available=True),
        make_university(id="other-level", level="Bachelor"),
        make_university(id="other-field", disciplines=["IT"]),
    ]
