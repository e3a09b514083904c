"""
Regular-expression catalogs used by the verifier and the classifier.

Everything here is built once at import and never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatternRule:
    group: str
    regex: re.Pattern[str]

    def first_match(self, text: str) -> str | None:
        match = self.regex.search(text)
        return match.group(0) if match else None


@dataclass(frozen=True)
class PatternCategory:
    """Weighted group of patterns; every occurrence counts."""

    name: str
    weight: int
    patterns: tuple[re.Pattern[str], ...]

    def count(self, text: str) -> int:
        return sum(1 for pattern in self.patterns for _ in pattern.finditer(text))

    def score(self, matches: int) -> float:
        return min(self.weight, matches * (self.weight / 3))


def _rules(group: str, *expressions: str) -> tuple[PatternRule, ...]:
    return tuple(PatternRule(group, re.compile(expression, re.IGNORECASE)) for expression in expressions)


def _category(name: str, weight: int, *expressions: str) -> PatternCategory:
    return PatternCategory(name, weight, tuple(re.compile(expression, re.IGNORECASE) for expression in expressions))


FAKE_PATTERNS: tuple[PatternRule, ...] = (
    *_rules(
        "sensationalism",
        r"shocking|amazing|incredible|unbelievable|mind-blowing|stunning",
        r"you won't believe|this will shock you|what happens next",
        r"amazing|astonishing|extraordinary|remarkable|spectacular|wonderful",
    ),
    *_rules(
        "medical",
        r"miracle cure|instant cure|secret cure|natural remedy|alternative treatment",
        r"doctors hate|big pharma|pharmaceutical conspiracy|medical establishment",
        r"cure.*cancer|eliminate.*disease|reverse.*aging|melt.*fat",
        r"ancient remedy|forgotten cure|hidden treatment|breakthrough",
    ),
    *_rules(
        "conspiracy",
        r"deep state|new world order|illuminati|global elite|shadow government",
        r"mainstream media.*lying|fake news media|controlled opposition",
        r"they don't want you to know|hidden truth|exposed|cover.*up",
        r"government.*hiding|conspiracy|secret.*plan|agenda",
        r"truth.*suppressed|media.*won't tell|censored|banned",
    ),
    *_rules(
        "ai-disclosure",
        r"as an ai|i'm an ai|artificial intelligence|language model",
        r"i don't have personal|i cannot provide personal|i don't have access to real-time",
        r"based on my training|as of my last update|i was last trained",
        r"my knowledge|my training data|my capabilities|my limitations",
    ),
    *_rules(
        "clickbait",
        r"one weird trick|simple trick|amazing discovery|secret revealed",
        r"this one thing|number \d+ will surprise you|doctors are speechless",
        r"click here|don't miss|must see|must read|must watch",
    ),
    *_rules(
        "emotional",
        r"before it's too late|act now|limited time|don't wait|hurry",
        r"share.*everyone|tell.*friends|spread.*word|going.*viral",
        r"warning|alert|attention|urgent|emergency",
    ),
)

_UNIVERSITIES = r"(harvard|stanford|oxford|cambridge|yale|princeton|mit)"
_WEEKDAYS = r"(monday|tuesday|wednesday|thursday|friday|saturday|sunday)"
_MONTHS = r"(january|february|march|april|may|june|july|august|september|october|november|december)"

CREDIBLE_PATTERNS: tuple[PatternRule, ...] = (
    *_rules(
        "sources",
        rf"according to {_UNIVERSITIES} university",
        r"published in (nature|science|jama|nejm|lancet|bmj)",
        r"study in (journal of|proceedings of|transactions of)",
    ),
    *_rules(
        "credentials",
        r"dr\.\s[a-z]+ [a-z]+, (professor|researcher|scientist) at",
        r"professor\s[a-z]+ [a-z]+, (chair|head|director) of",
        r"spokesperson\s[a-z]+ [a-z]+ said in (a statement|an interview|a press conference)",
    ),
    *_rules(
        "institutions",
        rf"{_UNIVERSITIES} (medical school|university|research center)",
        r"(national institutes of health|centers for disease control|world health organization) "
        r"(report|study|analysis|data)",
        r"(johns hopkins|mayo clinic|cleveland clinic) (researchers|scientists|physicians|experts)",
    ),
    *_rules(
        "outlets",
        r"(reuters|associated press|bbc|npr|pbs) (reported|confirmed|verified|investigated)",
        r"(washington post|new york times|wall street journal) (analysis|investigation|report)",
        r"(economist|atlantic|new yorker) (article|essay|investigation|profile)",
    ),
    *_rules(
        "data",
        r"\d+\spercent of (participants|respondents|patients|subjects|people)",
        r"\$\d+\s(million|billion) (investment|funding|grant|budget|cost)",
        r"survey of \d+ (people|participants|respondents|households|consumers)",
    ),
    *_rules(
        "balance",
        r"on the other hand, (researchers|critics|experts|analysts|officials) (argue|point out|note|emphasize)",
        r"however, (studies|data|evidence|research|analysis) (shows|indicates|suggests|demonstrates)",
        r"nevertheless, (some|many|several) (experts|researchers|scientists|analysts) (disagree|question|challenge)",
    ),
    *_rules(
        "dateline",
        rf"on {_WEEKDAYS}, {_MONTHS} \d{{1,2}}",
        rf"in (washington|new york|london|paris|berlin|tokyo|beijing) on {_WEEKDAYS}",
        r"at the (white house|capitol|parliament|united nations|pentagon|state department)",
    ),
)

BALANCED_LANGUAGE = re.compile(
    r"however|nevertheless|on the other hand|some experts|critics|alternative view", re.IGNORECASE
)
SPECIFIC_DATA = re.compile(
    r"\d+\spercent|\d+%|\$\d+\smillion|\$\d+\sbillion|\d+ people|\d+ patients", re.IGNORECASE
)

SUSPICION_CATEGORIES: tuple[PatternCategory, ...] = (
    _category(
        "aiGenerated",
        70,
        r"as an ai|i'm an ai|artificial intelligence|language model",
        r"i don't have personal|i cannot provide personal|i don't have access to real-time",
        r"based on my training|as of my last update|i was last trained",
    ),
    _category(
        "extremeClickbait",
        60,
        r"SHOCKING|AMAZING|INCREDIBLE|UNBELIEVABLE|MIND-BLOWING",
        r"you won't believe|this will shock you|scientists discover",
        r"MIRACLE|INSTANT|IMMEDIATELY|DESTROYS|ELIMINATES",
    ),
    _category(
        "medicalFake",
        80,
        r"miracle cure|natural remedy.*cancer|cure.*cancer",
        r"doctors hate|big pharma|pharmaceutical conspiracy",
        r"secret.*cure|hidden.*treatment|suppressed.*research",
    ),
    _category(
        "conspiracy",
        70,
        r"deep state|new world order|illuminati|global elite",
        r"mainstream media.*lying|fake news media|controlled opposition",
        r"they don't want you to know|hidden agenda|cover.*up",
    ),
)

CREDIBLE_SOURCES = re.compile(
    r"dr\.|professor|university|hospital|according to|study published|research shows", re.IGNORECASE
)
# Case-sensitive.
SPECIFIC_DETAILS = re.compile(r"\$[\d,]+|\d{4}|\d+%|\d+ (people|patients|workers|staff)")
