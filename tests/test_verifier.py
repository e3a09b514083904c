import pytest

from newscheck.samples import SAMPLES
from newscheck.verifier import MIXED_SIGNALS_REASON, PatternVerifier, match_phrases
from newscheck.patterns import CREDIBLE_PATTERNS, FAKE_PATTERNS


CREDIBLE_DENSE = (
    "According to Harvard University researchers, a survey of 500 participants found modest gains in sleep "
    "quality. Dr. Jane Smith, professor at Stanford, said the results were consistent with earlier work. "
    "Reuters reported the findings on Tuesday."
)
FAKE_LEANING = "Shocking report, act now. Reuters reported the vote."
EVEN_MIX = "Shocking turnout, Reuters reported on the vote."
THREE_FAKE_TWO_CREDIBLE = "Shocking miracle cure, act now. Reuters reported it and Harvard University confirmed."


@pytest.fixture
def verifier():
    return PatternVerifier()


def _steps(result):
    return [step.step for step in result.analysis_steps]


def test_credible_dense_content_is_verified_real(verifier):
    result = verifier.verify(CREDIBLE_DENSE)

    assert result.status == "verified-real"
    assert result.confidence == 90
    assert result.trust_score == 80
    assert result.manual_review_needed is False
    assert result.key_phrases == [
        "according to harvard university",
        "dr. jane smith, professor at",
        "harvard university",
        "reuters reported",
        "survey of 500 participants",
    ]
    assert [d.source for d in result.verification_details] == ["Reuters Fact Check", "Associated Press"]
    assert result.similar_articles[0].status == "Verified"
    assert _steps(result) == ["Pattern Analysis", "Credibility Markers", "Source Confirmation"]
    assert "(sufficient)" in result.analysis_steps[1].result


def test_fake_dense_content_is_verified_fake(verifier):
    result = verifier.verify(SAMPLES["fake"])

    assert result.status == "verified-fake"
    assert result.sources == ["Snopes: Rated False", "FactCheck.org: Rated Misleading"]
    assert result.confidence == 90
    assert result.trust_score == 20
    assert result.key_phrases[0] == "shocking"
    assert result.similar_articles[0].similarity == 87
    assert _steps(result) == ["Pattern Analysis", "Fake News Detection", "Fact-Check Database"]
    assert '"shocking"' in result.analysis_steps[1].result


def test_fake_leaning_mix_needs_review_but_reports_fake(verifier):
    result = verifier.verify(FAKE_LEANING)

    assert result.status == "verified-fake"
    assert result.manual_review_needed is True
    assert result.manual_review_reason == MIXED_SIGNALS_REASON
    assert result.confidence == 60
    assert result.similar_articles == []
    assert result.trust_score == 50
    assert result.analysis_steps[0].result == "Found 2 suspicious patterns and 1 credible patterns"
    assert result.analysis_steps[0].score == 50


def test_even_mix_stays_unverified(verifier):
    result = verifier.verify(EVEN_MIX)

    assert result.status == "unverified"
    assert result.manual_review_needed is True
    assert result.sources == ["Mixed credibility signals", "Manual review recommended"]
    assert [d.result for d in result.verification_details] == ["Potentially Misleading"]


def test_mixed_branch_never_reports_verified_real(verifier):
    # Two credible markers and no fake ones is still only "unverified".
    result = verifier.verify("However, research shows that 40 percent of people slept better.")

    assert result.status == "unverified"
    assert result.manual_review_needed is True


def test_empty_content(verifier):
    result = verifier.verify("")

    assert result.status == "unverified"
    assert result.trust_score == 50
    assert result.manual_review_needed is True
    assert result.key_phrases == []
    assert result.analysis_steps[0].result == "Found 0 suspicious patterns and 0 credible patterns"
    assert _steps(result) == ["Pattern Analysis", "Overall Assessment"]


def test_three_fake_two_credible_falls_through_to_mixed(verifier):
    """credible <= 1 gates the fake branch, so two credible markers skip it."""
    result = verifier.verify(THREE_FAKE_TWO_CREDIBLE)

    assert result.status == "verified-fake"
    assert result.manual_review_needed is True
    assert result.confidence == 60
    assert result.similar_articles == []
    assert result.trust_score == 35
    assert "Fact-Check Database" not in _steps(result)
    assert "Credibility Markers" in _steps(result)


def test_balanced_language_and_specific_data_raise_trust(verifier):
    result = verifier.verify("However, research shows that 40 percent of people slept better.")

    assert result.trust_score == 81
    assert _steps(result) == [
        "Pattern Analysis",
        "Credibility Markers",
        "Balanced Reporting",
        "Specific Data",
        "Overall Assessment",
    ]
    assert "(moderate)" in result.analysis_steps[1].result


def test_key_phrases_are_capped(verifier):
    text = (
        "shocking. you won't believe it. astonishing. miracle cure. big pharma. ancient remedy. deep state. "
        "fake news media. hidden truth. conspiracy. censored. as an ai. based on my training. click here. "
        "act now. urgent."
    )
    result = verifier.verify(text)

    assert len(result.key_phrases) == 10
    assert result.key_phrases[:3] == ["shocking", "you won't believe", "astonishing"]
    assert result.status == "verified-fake"
    assert result.trust_score == 20


def test_matching_is_case_insensitive(verifier):
    lower = verifier.verify(FAKE_LEANING.lower())
    upper = verifier.verify(FAKE_LEANING.upper())

    assert lower == upper


def test_match_phrases_reports_one_phrase_per_pattern():
    phrases = match_phrases(FAKE_PATTERNS, "amazing amazing amazing")

    # "amazing" sits in two sensationalism patterns
    assert phrases == ["amazing", "amazing"]
    assert match_phrases(CREDIBLE_PATTERNS, "nothing to see") == []
