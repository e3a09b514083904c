from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .classifier import ClassificationScorer
from .models import AnalysisReport, AnalysisStep, CredibilityFactors
from .verifier import PatternVerifier

logger = logging.getLogger(__name__)

STRICT_MODE_SUMMARY = "🚨 VERIFIED FAKE: This content contains suspicious patterns typical of misinformation."


@dataclass
class ContentScorer:
    verifier: PatternVerifier = field(default_factory=PatternVerifier)
    classifier: ClassificationScorer = field(default_factory=ClassificationScorer)

    def analyze(self, content: str) -> AnalysisReport:
        verification = self.verifier.verify(content)
        report = self.classifier.classify(content, verification)
        logger.info(
            f"Analysis complete: status={report.verification_status}, "
            f"type={report.content_type}, credibility={report.credibility_score}, trust={report.trust_score}"
        )
        return report


def fallback_report() -> AnalysisReport:
    """Report returned when a request cannot be analyzed."""
    return AnalysisReport(
        credibility_score=30,
        risk_level="medium",
        content_type="unverified",
        factors=CredibilityFactors(source_reliability=30, factual_accuracy=30, bias_level=60, emotional_language=60),
        red_flags=["Analysis failed - treating as medium risk"],
        positive_indicators=[],
        summary="Analysis failed. Content could not be verified.",
        recommendations=["Verify with reliable sources before sharing"],
        confidence=60,
        verification_status="unverified",
        verification_sources=["Analysis failed"],
        verification_details=[],
        key_phrases=[],
        similar_articles=[],
        analysis_steps=[AnalysisStep(step="System Error", result="Analysis failed", score=0)],
        manual_review_needed=True,
        manual_review_reason="System error during analysis",
        trust_score=30,
    )


def force_fake(report: AnalysisReport) -> AnalysisReport:
    """Strict mode: anything short of verified-real is reported as fake."""
    if report.verification_status == "verified-real":
        return report
    return report.model_copy(
        update={
            "verification_status": "verified-fake",
            "risk_level": "high",
            "content_type": "fake-news",
            "credibility_score": min(report.credibility_score, 20),
            "trust_score": min(report.trust_score, 20),
            "summary": STRICT_MODE_SUMMARY,
        }
    )
