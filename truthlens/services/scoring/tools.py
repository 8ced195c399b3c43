import logging
import math
import re
from typing import List, Optional

from truthlens.core.models import AnalysisType, FactCheck, KeyFinding, Source

logger = logging.getLogger(__name__)


BASE_SCORE = 70
SENSATIONAL_CLAIM_WORDS = ("breaking", "overnight", "revolutionary")
URGENT_WORDS = ("breaking", "urgent")
URL_PATTERN = re.compile(r"https?://")

MAX_FACT_CHECKS = 3
MIN_CLAIM_LENGTH = 20

# (keywords, status, explanation); first match wins
CLAIM_RULES = (
    (("overnight", "instantly"), "FALSE",
     "Claims of instant or overnight solutions are typically unfounded."),
    (("research", "study"), "PARTIAL",
     "Some research exists but may not support all claims made."),
    (("company", "founded"), "TRUE",
     "Basic factual information verified through public records."),
)
UNVERIFIED_EXPLANATION = "Unable to verify this claim with available sources."

BASE_SOURCES = (
    Source(url="https://www.reuters.com/fact-check/", title="Reuters Fact Check Database", credibility=9.1),
    Source(url="https://www.snopes.com/", title="Snopes Fact-Checking", credibility=8.7),
)
CLIMATE_SOURCE = Source(url="https://climate.gov/", title="Climate.gov Official Resource", credibility=9.5)
HEALTH_SOURCE = Source(url="https://www.who.int/", title="World Health Organization", credibility=9.3)


class ScoringTools:
    """
    Heuristic rules used by the credibility scoring agent.
    None of these touch randomness; the agent supplies the random draws.
    """

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round to the nearest integer, .5 always rounding up."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def has_source_links(content: str) -> bool:
        return URL_PATTERN.search(content) is not None

    @staticmethod
    def base_score(content: str, content_type: AnalysisType) -> int:
        """
        Apply the independent content penalties to the base score.

        Args:
            content (str): The submitted content.
            content_type (str): "url" or "text".

        Returns:
            int: The penalized base score, before any random jitter.
        """
        score = BASE_SCORE
        lowered = content.lower()

        if "!" in content:
            score -= 15  # sensational language
        if content_type == "text" and not ScoringTools.has_source_links(content):
            score -= 10  # no source links
        if len(content) < 100:
            score -= 20  # too short
        if any(word in lowered for word in SENSATIONAL_CLAIM_WORDS):
            score -= 25  # sensational claims

        logger.debug(f"Base score {score} for {content_type} content of length {len(content)}")
        return score

    @staticmethod
    def key_findings(content: str, overall: float) -> List[KeyFinding]:
        findings = []
        lowered = content.lower()

        if overall < 50:
            findings.append(KeyFinding(
                type="error",
                title="Low Credibility Score",
                description="Content shows multiple indicators of potential misinformation",
            ))

        if any(word in lowered for word in URGENT_WORDS):
            findings.append(KeyFinding(
                type="warning",
                title="Sensational Language",
                description="Use of urgent or breaking news language without verification",
            ))

        if "http" not in content and len(content) > 200:
            findings.append(KeyFinding(
                type="info",
                title="Missing Source Links",
                description="No external sources or references provided",
            ))

        if overall > 70:
            findings.append(KeyFinding(
                type="success",
                title="Good Language Patterns",
                description="Content shows neutral, factual language patterns",
            ))

        return findings

    @staticmethod
    def extract_claims(content: str, limit: int = MAX_FACT_CHECKS) -> List[str]:
        """Split on periods and keep the first sentences long enough to be a claim."""
        claims = [segment.strip() for segment in content.split(".") if len(segment.strip()) > MIN_CLAIM_LENGTH]
        return claims[:limit]

    @staticmethod
    def classify_claim(claim: str) -> FactCheck:
        lowered = claim.lower()
        for keywords, status, explanation in CLAIM_RULES:
            if any(word in lowered for word in keywords):
                return FactCheck(claim=claim, status=status, explanation=explanation)
        return FactCheck(claim=claim, status="UNVERIFIED", explanation=UNVERIFIED_EXPLANATION)

    @staticmethod
    def fact_checks(content: str) -> List[FactCheck]:
        return [ScoringTools.classify_claim(claim) for claim in ScoringTools.extract_claims(content)]

    @staticmethod
    def sources(content: str, content_type: AnalysisType, origin_credibility: Optional[float] = None) -> List[Source]:
        """
        Build the reference list for a submission.

        The submitted URL comes first (url submissions only), then the fixed
        fact-check databases, then topic authorities matched in the content.
        """
        sources = list(BASE_SOURCES)
        lowered = content.lower()

        if content_type == "url":
            if origin_credibility is None:
                raise ValueError("origin_credibility is required for url submissions")
            sources.insert(0, Source(url=content, title="Original Source", credibility=origin_credibility))

        if "climate" in lowered:
            sources.append(CLIMATE_SOURCE)
        if "health" in lowered:
            sources.append(HEALTH_SOURCE)

        return sources
