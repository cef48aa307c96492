"""
Chance API Routes

Exposes the chance engine via REST API.
Main endpoint: POST /chances
"""

import logging
from typing import Optional, Dict, Any
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import UserProfile, ScoringResult
from .logic.constants import ENGINE_VERSION
from .logic.engine import ChanceEngine
from .logic.percentiles import profile_percentiles
from .logic.suggestions import build_suggestions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chances", tags=["chances"])


def get_engine(request: Request) -> ChanceEngine:
    """Engine built once at startup and kept on the app state."""
    return request.app.state.engine


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class ChanceRequest(BaseModel):
    """Request body for chances endpoint."""
    profile: Dict[str, Any] = Field(
        ...,
        description="Questionnaire answers",
        examples=[{
            "country_of_study": "Any",
            "level": "Master",
            "grading_scheme": "4-point",
            "grading_average": "3.6",
            "finance_source": "Mixed",
            "budget": "$10,000–$20,000",
            "english_exam_type": "IELTS",
            "english_score": "7.0",
            "standardized_exam_type": "None",
            "faculty": ["Business", "Finance"],
        }],
    )
    algorithm: Optional[str] = Field(
        default=None,
        description="'simple' or 'pro'; derived from tier when omitted"
    )
    tier: Optional[str] = Field(
        default=None,
        description="Entitlement tier: free, pro_lite, pro, pro_plus"
    )
    bonus_universities: int = Field(default=0, ge=0)
    sort_by: str = Field(
        default="chance",
        description="Result order: 'chance' or 'budget'"
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Score the catalog for a profile")
@router.post("/", summary="Score the catalog for a profile", include_in_schema=False)
def get_chances(
    request: ChanceRequest,
    engine: ChanceEngine = Depends(get_engine),
):
    """
    Estimate admission chances across the catalog.

    **Request Body:**
    - `profile`: Applicant's questionnaire answers
    - `algorithm`: Force 'simple' or 'pro'
    - `tier` / `bonus_universities`: Entitlement gating
    - `sort_by`: 'chance' or 'budget'

    **Response:**
    - Ordered universities with percentage, chance level and explanation
    - Match details and improvement suggestions for each result
    """
    try:
        try:
            profile = UserProfile(**request.profile)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid profile: {str(e)}"
            )

        try:
            report = engine.evaluate(
                profile,
                algorithm=request.algorithm,
                tier=request.tier,
                bonus_universities=request.bonus_universities,
                sort_by=request.sort_by,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return {
            "request_id": report.request_id,
            "algorithm": report.algorithm,
            "pro_mode": report.pro_mode,
            "summary": {
                "total_evaluated": report.total_evaluated,
                "total_available": report.total_available,
                "total_eligible": report.total_eligible,
                "visible_limit": report.visible_limit,
                "processing_time_ms": report.processing_time_ms,
            },
            "results": [_serialize_result(r) for r in report.results],
            "test_percentiles": profile_percentiles(profile),
            "warnings": report.warnings,
            "engine_version": report.engine_version,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Chance scoring failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


def _serialize_result(result: ScoringResult) -> Dict[str, Any]:
    """Convert ScoringResult to JSON-serializable dict."""
    uni = result.university
    details = result.match_details
    return {
        "university_id": uni.id,
        "university_name": uni.name,
        "country": uni.country,
        "city": uni.city,
        "level": uni.level,
        "qs_ranking": uni.qs_ranking,
        "tuition_usd": uni.requirements.tuition_usd,
        "percentage": result.percentage,
        "chance_level": result.chance_level,
        "explanation": result.explanation,
        "match_details": {
            "gpa_match": details.gpa_match,
            "english_match": details.english_match,
            "budget_match": details.budget_match,
            "discipline_match": details.discipline_match,
            "standardized_test_match": details.standardized_test_match,
        },
        "eligibility_issue": result.eligibility_issue,
        "financial_status": result.financial_status,
        "diminishing_returns_applied": result.diminishing_returns_applied,
        "improvement_suggestions": [
            {"area": s.area, "suggestion": s.suggestion, "priority": s.priority}
            for s in build_suggestions(result)
        ],
    }


@router.post("/compare/{university_id}", summary="Simple vs Pro estimate for one university")
def compare_chances(
    university_id: str,
    profile_data: Dict[str, Any],
    engine: ChanceEngine = Depends(get_engine),
):
    """Contrast the free and the paid estimate for one university."""
    try:
        profile = UserProfile(**profile_data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid profile: {str(e)}")

    comparison = engine.compare(profile, university_id)
    if comparison is None:
        raise HTTPException(status_code=404, detail="University not found")

    return {
        "simple": _serialize_result(comparison["simple"]),
        "pro": _serialize_result(comparison["pro"]),
        "pro_gap_reasons": comparison["pro_gap_reasons"],
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Chance engine health check")
def health_check(engine: ChanceEngine = Depends(get_engine)):
    """Check if chance engine is operational."""
    return {
        "status": "ok",
        "engine": "chances",
        "version": ENGINE_VERSION,
        "universities": len(engine.catalog),
        "pro_mode": engine.pro_mode.value,
    }
