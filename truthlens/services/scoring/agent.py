# services/scoring/agent.py
import logging
import random
import string
import time
from datetime import datetime, timezone
from typing import Optional, Tuple

from truthlens.core.models import AnalysisInput, AnalysisResult, CredibilityScore
from truthlens.services.scoring.tools import ScoringTools

log = logging.getLogger(__name__)

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_SUFFIX_LENGTH = 9


class CredibilityScoringAgent:
    """
    Heuristic credibility scorer.

    Turns one submission into a full analysis record: score breakdown, key
    findings, fact-checks and sources. All randomness comes from ``rng`` so a
    seeded generator reproduces results exactly.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def new_analysis_id(self) -> str:
        suffix = "".join(self.rng.choice(ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
        return f"analysis_{int(time.time() * 1000)}_{suffix}"

    def score(self, analysis_input: AnalysisInput) -> Tuple[CredibilityScore, float]:
        """
        Derive the score breakdown.

        Returns:
            (score, raw_overall): the rounded breakdown and the unrounded
            overall score the findings are judged against.
        """
        base = ScoringTools.base_score(analysis_input.content, analysis_input.type)

        overall = max(15.0, min(95.0, base + self.rng.uniform(-10, 10)))
        source_authority = max(10.0, overall - 20 + self.rng.uniform(0, 15))
        fact_verification = max(15.0, overall - 10 + self.rng.uniform(0, 20))
        language_analysis = max(20.0, overall + 10 + self.rng.uniform(0, 15))

        score = CredibilityScore(
            overall=ScoringTools.round_half_up(overall),
            source_authority=ScoringTools.round_half_up(source_authority),
            fact_verification=ScoringTools.round_half_up(fact_verification),
            language_analysis=ScoringTools.round_half_up(language_analysis),
        )
        return score, overall

    def run(self, analysis_input: AnalysisInput) -> AnalysisResult:
        log.info(f"CredibilityScoringAgent analyzing {analysis_input.type}: {analysis_input.content[:60]}...")

        analysis_id = self.new_analysis_id()
        score, raw_overall = self.score(analysis_input)

        origin_credibility = None
        if analysis_input.type == "url":
            origin_credibility = self.rng.uniform(3, 8)

        result = AnalysisResult(
            id=analysis_id,
            content=analysis_input.content,
            type=analysis_input.type,
            credibility_score=score,
            key_findings=ScoringTools.key_findings(analysis_input.content, raw_overall),
            fact_checks=ScoringTools.fact_checks(analysis_input.content),
            sources=ScoringTools.sources(analysis_input.content, analysis_input.type, origin_credibility),
            analyzed_at=datetime.now(timezone.utc),
            processing_time=1500 + self.rng.uniform(0, 2000),
        )

        log.info(f"Analysis {analysis_id} scored overall={score.overall} ({score.label})")
        return result

