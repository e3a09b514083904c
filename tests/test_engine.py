import pytest

from newscheck.engine import STRICT_MODE_SUMMARY, ContentScorer, fallback_report, force_fake
from newscheck.models import AnalysisReport, AnalyzeRequest
from newscheck.samples import SAMPLES


TEXTS = [
    "",
    "   ",
    SAMPLES["real"],
    SAMPLES["fake"],
    SAMPLES["ai"],
    SAMPLES["borderline"],
    "However, research shows that 40 percent of people slept better.",
    "SHOCKING! AMAZING! MIRACLE cure for cancer! Big pharma and the deep state cover-up! " * 20,
]


@pytest.fixture(scope="module")
def scorer():
    return ContentScorer()


def _numeric_fields(report: AnalysisReport):
    yield report.credibility_score
    yield report.confidence
    yield report.trust_score
    yield from report.factors.model_dump().values()
    yield from (step.score for step in report.analysis_steps)
    yield from (detail.confidence for detail in report.verification_details)
    yield from (article.similarity for article in report.similar_articles)


@pytest.mark.parametrize("text", TEXTS)
def test_every_score_is_within_bounds(scorer, text):
    report = scorer.analyze(text)

    assert all(0 <= value <= 100 for value in _numeric_fields(report))
    assert len(report.red_flags) <= 10
    assert len(report.positive_indicators) <= 6
    assert len(report.key_phrases) <= 10


@pytest.mark.parametrize("text", TEXTS)
def test_analysis_is_idempotent(scorer, text):
    assert scorer.analyze(text) == scorer.analyze(text)


@pytest.mark.parametrize(
    "sample, status, content_type, risk_level",
    [
        ("real", "unverified", "news", "low"),
        ("fake", "verified-fake", "fake-news", "high"),
        ("ai", "verified-fake", "fake-news", "high"),
        ("borderline", "unverified", "news", "low"),
    ],
)
def test_samples(scorer, sample, status, content_type, risk_level):
    report = scorer.analyze(SAMPLES[sample])

    assert report.verification_status == status
    assert report.content_type == content_type
    assert report.risk_level == risk_level


def test_fake_sample_lists_detected_categories(scorer):
    report = scorer.analyze(SAMPLES["fake"])

    assert report.credibility_score <= 40
    assert any(flag.startswith("Detected: extremeClickbait") for flag in report.red_flags)
    assert any(flag.startswith("Detected: medicalFake") for flag in report.red_flags)


def test_ai_sample_scores(scorer):
    report = scorer.analyze(SAMPLES["ai"])

    assert report.credibility_score == 33
    assert "Detected: aiGenerated: 4 matches" in report.red_flags


def test_empty_content_defaults(scorer):
    report = scorer.analyze("")

    assert report.verification_status == "unverified"
    assert report.trust_score == 50
    assert report.manual_review_needed is True
    assert report.credibility_score == 85


def test_fallback_report():
    report = fallback_report()

    assert report.credibility_score == 30
    assert report.risk_level == "medium"
    assert report.content_type == "unverified"
    assert report.verification_status == "unverified"
    assert report.manual_review_needed is True
    assert report.trust_score == 30
    assert report.analysis_steps[0].step == "System Error"
    assert report.analysis_steps[0].score == 0


def test_force_fake_rewrites_unverified_reports(scorer):
    report = scorer.analyze("Shocking turnout, Reuters reported on the vote.")
    forced = force_fake(report)

    assert report.verification_status == "unverified"
    assert forced.verification_status == "verified-fake"
    assert forced.content_type == "fake-news"
    assert forced.risk_level == "high"
    assert forced.credibility_score == 20
    assert forced.trust_score == 20
    assert forced.summary == STRICT_MODE_SUMMARY
    assert forced.red_flags == report.red_flags


def test_force_fake_leaves_verified_real_alone(scorer):
    report = scorer.analyze(
        "According to Harvard University researchers, a survey of 500 participants found modest gains. "
        "Dr. Jane Smith, professor at Stanford, agreed. Reuters reported the findings."
    )

    assert report.verification_status == "verified-real"
    assert force_fake(report) is report


def test_report_serializes_with_camel_case_keys(scorer):
    payload = scorer.analyze(SAMPLES["fake"]).model_dump(by_alias=True)

    assert {"credibilityScore", "riskLevel", "contentType", "redFlags", "positiveIndicators"} <= payload.keys()
    assert {"verificationStatus", "keyPhrases", "analysisSteps", "manualReviewNeeded", "trustScore"} <= payload.keys()
    assert set(payload["factors"]) == {"sourceReliability", "factualAccuracy", "biasLevel", "emotionalLanguage"}


def test_analyze_request_prefers_content_over_url():
    assert AnalyzeRequest(content="hello", url="https://example.com").text_to_analyze == "hello"
    assert AnalyzeRequest(content="  ", url="https://example.com").text_to_analyze == (
        "URL content from: https://example.com"
    )


def test_analyze_request_requires_content_or_url():
    with pytest.raises(ValueError):
        AnalyzeRequest(content="   ")
    with pytest.raises(ValueError):
        AnalyzeRequest.model_validate({})
    assert AnalyzeRequest.model_validate({"content": "x", "forceFake": True}).force_fake is True
