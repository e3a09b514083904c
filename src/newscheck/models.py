from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

VerificationStatus = Literal["verified-real", "verified-fake", "unverified"]
RiskLevel = Literal["low", "medium", "high"]
# "unverified" is only produced by the fallback report.
ContentType = Literal["news", "fake-news", "satire", "opinion", "biased-factual", "propaganda", "unverified"]


class WireModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VerificationDetail(WireModel):
    model_config = ConfigDict(frozen=True)

    source: str
    result: str
    confidence: float = Field(..., ge=0, le=100)
    url: str


class SimilarArticle(WireModel):
    model_config = ConfigDict(frozen=True)

    title: str
    source: str
    status: str
    similarity: float = Field(..., ge=0, le=100)


class AnalysisStep(WireModel):
    model_config = ConfigDict(frozen=True)

    step: str
    result: str
    score: float = Field(..., ge=0, le=100)


class VerificationResult(WireModel):
    model_config = ConfigDict(frozen=True)

    status: VerificationStatus
    sources: list[str] = Field(default_factory=list)
    confidence: float = Field(..., ge=0, le=100)
    verification_details: list[VerificationDetail] = Field(default_factory=list)
    key_phrases: list[str] = Field(default_factory=list, max_length=10)
    similar_articles: list[SimilarArticle] = Field(default_factory=list)
    analysis_steps: list[AnalysisStep] = Field(default_factory=list)
    manual_review_needed: bool = False
    manual_review_reason: str = ""
    trust_score: float = Field(..., ge=0, le=100)


class CredibilityFactors(WireModel):
    source_reliability: float = Field(..., ge=0, le=100)
    factual_accuracy: float = Field(..., ge=0, le=100)
    bias_level: float = Field(..., ge=0, le=100)
    emotional_language: float = Field(..., ge=0, le=100)


class AnalysisReport(WireModel):
    credibility_score: float = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    content_type: ContentType
    factors: CredibilityFactors
    red_flags: list[str] = Field(default_factory=list, max_length=10)
    positive_indicators: list[str] = Field(default_factory=list, max_length=6)
    summary: str
    recommendations: list[str] = Field(default_factory=list)
    confidence: float = Field(..., ge=0, le=100)
    verification_status: VerificationStatus
    verification_sources: list[str] = Field(default_factory=list)
    verification_details: list[VerificationDetail] = Field(default_factory=list)
    key_phrases: list[str] = Field(default_factory=list, max_length=10)
    similar_articles: list[SimilarArticle] = Field(default_factory=list)
    analysis_steps: list[AnalysisStep] = Field(default_factory=list)
    manual_review_needed: bool = False
    manual_review_reason: str = ""
    trust_score: float = Field(..., ge=0, le=100)


class AnalyzeRequest(WireModel):
    content: str | None = None
    url: str | None = None
    force_fake: bool = False

    @model_validator(mode="after")
    def _ensure_input(self) -> "AnalyzeRequest":
        if not (self.content and self.content.strip()) and not self.url:
            raise ValueError("Either content or url is required.")
        return self

    @property
    def text_to_analyze(self) -> str:
        if self.content and self.content.strip():
            return self.content
        return f"URL content from: {self.url}"
