from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .models import AnalysisReport, CredibilityFactors, VerificationResult
from .patterns import CREDIBLE_SOURCES, SPECIFIC_DETAILS, SUSPICION_CATEGORIES, PatternCategory
from .verifier import clamp_score

logger = logging.getLogger(__name__)

MAX_RED_FLAGS = 10
MAX_POSITIVE_INDICATORS = 6

FACTORS = {
    "verified-real": CredibilityFactors(
        source_reliability=85, factual_accuracy=85, bias_level=30, emotional_language=30
    ),
    "verified-fake": CredibilityFactors(
        source_reliability=25, factual_accuracy=25, bias_level=80, emotional_language=80
    ),
    "unverified": CredibilityFactors(
        source_reliability=50, factual_accuracy=50, bias_level=50, emotional_language=50
    ),
}

SUMMARIES = {
    "verified-real": (
        "✅ VERIFIED REAL: This content has been verified as accurate by multiple fact-checking sources. "
        "It appears to be legitimate news that meets journalistic standards."
    ),
    "verified-fake": (
        "🚨 VERIFIED FAKE: This content has been verified as false by fact-checking organizations. "
        "It contains misinformation and should not be trusted or shared."
    ),
    "unverified": (
        "⚠️ CAUTION: This content could not be definitively verified. "
        "Treat with caution and verify with additional sources."
    ),
}

RECOMMENDATIONS = {
    "verified-real": (
        "✅ This content appears to be reliable",
        "Always verify important information with multiple sources",
        "Consider the publication date and context",
        "Be aware that even factual reporting can have some bias",
    ),
    "verified-fake": (
        "🚫 DO NOT SHARE - This is verified misinformation",
        "Report this content if seen on social media",
        "Inform others who may have shared this content",
        "Check fact-checking websites for more information",
    ),
    "unverified": (
        "⚠️ Verify with additional sources before sharing",
        "Look for corroborating evidence from reputable sources",
        "Consider the source's track record for accuracy",
        "Be cautious about claims that seem too good to be true",
    ),
}

FAKE_LEAD_FLAG = "🚨 VERIFIED FAKE: This content has been verified as false by fact-checking sources"
REAL_LEAD_INDICATOR = "✅ VERIFIED REAL: This content has been verified as accurate by fact-checking sources"
CAUTION_FLAG = "⚠️ CAUTION: This content contains potentially misleading information"
UNVERIFIED_INDICATOR = "ℹ️ UNVERIFIED: This content appears legitimate but has not been fully verified"
MISINFORMATION_FLAGS = (
    "Uses sensationalist and manipulative language",
    "Contains suspicious patterns typical of misinformation",
    "Lacks proper journalistic standards",
)


def _fake_news_score(suspicion: float) -> int:
    return max(20, 40 - math.floor(suspicion / 10))


class ClassificationScorer:
    """Weighs suspicious categories against the verification outcome."""

    def __init__(self, *, categories: Sequence[PatternCategory] = SUSPICION_CATEGORIES) -> None:
        self._categories = tuple(categories)

    def suspicion(self, content: str) -> tuple[float, list[str]]:
        """Total suspicion score and a ``category: N matches`` note per hit category."""
        total = 0.0
        notes = []
        for category in self._categories:
            matches = category.count(content)
            if matches > 0:
                total += category.score(matches)
                notes.append(f"{category.name}: {matches} matches")
        return total, notes

    def classify(self, content: str, verification: VerificationResult) -> AnalysisReport:
        suspicion, detected = self.suspicion(content)
        logger.debug(f"Total suspicion score: {suspicion}")

        status = verification.status
        confidence = verification.confidence

        if status == "verified-fake":
            content_type, risk_level = "fake-news", "high"
            credibility_score = _fake_news_score(suspicion)
        elif status == "verified-real":
            content_type, risk_level = "news", "low"
            credibility_score = min(90, 70 + math.floor(confidence / 10))
        elif suspicion >= 40:
            content_type, risk_level = "fake-news", "high"
            credibility_score = _fake_news_score(suspicion)
        elif suspicion >= 20:
            content_type, risk_level = "biased-factual", "medium"
            credibility_score = max(40, 60 - suspicion)
        else:
            content_type, risk_level = "news", "low"
            credibility_score = min(85, 65 + math.floor((100 - suspicion) / 5))

        red_flags: list[str] = []
        positive_indicators: list[str] = []

        if status == "verified-fake":
            red_flags.append(FAKE_LEAD_FLAG)
            red_flags.extend(f"Fact check: {source}" for source in verification.sources)
        elif status == "verified-real":
            positive_indicators.append(REAL_LEAD_INDICATOR)
            positive_indicators.extend(f"Verification: {source}" for source in verification.sources)
        elif suspicion >= 20:
            red_flags.append(CAUTION_FLAG)
        else:
            positive_indicators.append(UNVERIFIED_INDICATOR)

        if content_type == "fake-news":
            red_flags.extend(MISINFORMATION_FLAGS)
            red_flags.extend(f"Detected: {note}" for note in detected)

        if CREDIBLE_SOURCES.search(content):
            positive_indicators.append("References credible sources and institutions")
        if SPECIFIC_DETAILS.search(content):
            positive_indicators.append("Contains specific, verifiable details")

        return AnalysisReport(
            credibility_score=clamp_score(credibility_score),
            risk_level=risk_level,
            content_type=content_type,
            factors=FACTORS[status].model_copy(),
            red_flags=red_flags[:MAX_RED_FLAGS],
            positive_indicators=positive_indicators[:MAX_POSITIVE_INDICATORS],
            summary=SUMMARIES[status],
            recommendations=list(RECOMMENDATIONS[status]),
            confidence=clamp_score(confidence),
            verification_status=status,
            verification_sources=list(verification.sources),
            verification_details=list(verification.verification_details),
            key_phrases=list(verification.key_phrases),
            similar_articles=list(verification.similar_articles),
            analysis_steps=list(verification.analysis_steps),
            manual_review_needed=verification.manual_review_needed,
            manual_review_reason=verification.manual_review_reason,
            trust_score=verification.trust_score,
        )
