from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any, Literal


AnalysisType = Literal["url", "text"]
FindingType = Literal["warning", "error", "info", "success"]
FactCheckStatus = Literal["TRUE", "FALSE", "PARTIAL", "UNVERIFIED"]


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisInput(CamelModel):
    content: str = Field(..., min_length=1, description="Raw text or a URL to analyze.")
    type: AnalysisType = Field(..., description="Whether the content is a URL or free text.")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Content is required")
        return value


class CredibilityScore(CamelModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(..., ge=0, le=100)
    # Sub-scores only have floors; they are allowed to exceed 100.
    source_authority: int = Field(..., ge=0)
    fact_verification: int = Field(..., ge=0)
    language_analysis: int = Field(..., ge=0)

    @computed_field
    @property
    def label(self) -> str:
        if self.overall >= 70:
            return "High Credibility"
        if self.overall >= 50:
            return "Moderate Credibility"
        return "Low Credibility"


class KeyFinding(CamelModel):
    model_config = ConfigDict(frozen=True)

    type: FindingType
    title: str
    description: str


class FactCheck(CamelModel):
    model_config = ConfigDict(frozen=True)

    claim: str = Field(..., description="Sentence taken verbatim from the submitted content.")
    status: FactCheckStatus
    explanation: str


class Source(CamelModel):
    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    credibility: float = Field(..., ge=0, le=10)


class AnalysisResult(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    type: AnalysisType
    credibility_score: CredibilityScore
    key_findings: List[KeyFinding] = Field(default_factory=list)
    fact_checks: List[FactCheck] = Field(default_factory=list)
    sources: List[Source] = Field(default_factory=list)
    analyzed_at: datetime
    processing_time: float = Field(..., description="Simulated processing time in milliseconds.")


# === API envelopes ===
class AnalyzeResponse(CamelModel):
    success: bool = True
    analysis_id: str
    message: str = "Analysis completed successfully"
    result: AnalysisResult


class HealthResponse(CamelModel):
    success: bool = True
    message: str
    timestamp: datetime
    version: str


class StatsResponse(CamelModel):
    success: bool = True
    store: Dict[str, Any]
    scoring_seed: Optional[int] = None
