# api/v1/endpoints.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from truthlens.core.config import config
from truthlens.core.errors import AnalysisNotFoundError
from truthlens.core.models import AnalysisInput, AnalysisResult, AnalyzeResponse, HealthResponse, StatsResponse
from truthlens.services.orchestrator import AnalysisOrchestrator, get_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix=config.API_PREFIX, tags=["v1"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_content(
    request: AnalysisInput,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
) -> AnalyzeResponse:
    """
    Score a URL or text submission and store the result.
    The returned analysisId can be fetched again from /analysis/{id}.
    """
    logger.info(f"Received analysis request of type: {request.type}")

    try:
        result = await orchestrator.run(request)
    except Exception as e:
        logger.error(f"Analysis failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return AnalyzeResponse(analysis_id=result.id, result=result)


@router.get("/analysis/{analysis_id}", response_model=AnalysisResult)
def get_analysis(
    analysis_id: str,
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
) -> AnalysisResult:
    try:
        return orchestrator.get(analysis_id)
    except AnalysisNotFoundError:
        raise HTTPException(status_code=404, detail="Analysis result not found")
    except Exception as e:
        logger.error(f"Fetching analysis {analysis_id} failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        message="TruthLens API is running",
        timestamp=datetime.now(timezone.utc),
        version=config.VERSION,
    )


@router.get("/stats", response_model=StatsResponse)
def get_stats(orchestrator: AnalysisOrchestrator = Depends(get_orchestrator)) -> StatsResponse:
    """Result store statistics."""
    try:
        store_stats = orchestrator.store.stats()
    except Exception as e:
        logger.error(f"Reading store stats failed: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return StatsResponse(store=store_stats, scoring_seed=config.SCORING_SEED)
