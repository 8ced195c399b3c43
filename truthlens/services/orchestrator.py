import asyncio
import logging
import random
from typing import Optional

from truthlens.core.config import config
from truthlens.core.errors import AnalysisNotFoundError
from truthlens.core.models import AnalysisInput, AnalysisResult
from truthlens.core.store import ResultStore, build_store
from truthlens.services.scoring.agent import CredibilityScoringAgent
from truthlens.services.scoring.demo import build_demo_result


logger = logging.getLogger(__name__)


class AnalysisOrchestrator:
    """
    Owns the scoring call: scores a submission, stores the result and serves
    stored results back by id. The demo result is seeded on construction.
    """

    def __init__(self, store: ResultStore, agent: CredibilityScoringAgent, delay: float = 0.0):
        self.store = store
        self.agent = agent
        self.delay = delay
        self.store.seed(build_demo_result())

    async def run(self, analysis_input: AnalysisInput) -> AnalysisResult:
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        result = self.agent.run(analysis_input)
        await asyncio.to_thread(self.store.put, result)
        logger.info(f"Stored analysis {result.id} ({len(result.fact_checks)} fact checks, {len(result.sources)} sources)")
        return result

    def get(self, analysis_id: str) -> AnalysisResult:
        result = self.store.get(analysis_id)
        if result is None:
            logger.info(f"Analysis result not found: {analysis_id}")
            raise AnalysisNotFoundError(analysis_id)
        return result


_orchestrator: Optional[AnalysisOrchestrator] = None


def build_orchestrator() -> AnalysisOrchestrator:
    """Build an orchestrator from the application configuration."""
    rng = random.Random(config.SCORING_SEED)
    if config.SCORING_SEED is not None:
        logger.info(f"Scoring with fixed seed {config.SCORING_SEED}")
    return AnalysisOrchestrator(
        store=build_store(config),
        agent=CredibilityScoringAgent(rng=rng),
        delay=config.ANALYSIS_DELAY,
    )


def get_orchestrator() -> AnalysisOrchestrator:
    """Process-wide orchestrator, created on first use."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = build_orchestrator()
    return _orchestrator
