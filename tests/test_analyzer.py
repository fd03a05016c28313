import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from socialgate.engine import analyzer
from socialgate.engine.analyzer import analyze_content, suggest_improvements
from socialgate.models import CategoryScore, ModerationVerdict


SAFE = ModerationVerdict(is_problematic=False, categories=(), score=0.1, message="Content appears safe")


def flagged(*names):
    categories = tuple(CategoryScore(name, 0.9, 0.5, True) for name in names)
    return ModerationVerdict(is_problematic=True, categories=categories, score=0.9, message="flagged")


def fake_check(verdict):
    async def _check(text):
        return verdict
    return _check


@pytest.mark.asyncio
async def test_analyze_safe_content(monkeypatch):
    monkeypatch.setattr(analyzer, "check_content", fake_check(SAFE))

    analysis = await analyze_content("hello")

    assert analysis.can_post is True
    assert analysis.feedback == "Content appears safe to post."
    assert analysis.verdict is SAFE


@pytest.mark.asyncio
async def test_analyze_flagged_content(monkeypatch):
    verdict = flagged("INSULT")
    monkeypatch.setattr(analyzer, "check_content", fake_check(verdict))

    analysis = await analyze_content("you fool")

    assert analysis.can_post is False
    assert analysis.feedback.startswith("This content may contain: insulting or negative comments")


@pytest.mark.asyncio
async def test_analyze_fail_safe_verdict(monkeypatch):
    verdict = ModerationVerdict(is_problematic=True, categories=(), score=1.0, message="error")
    monkeypatch.setattr(analyzer, "check_content", fake_check(verdict))

    analysis = await analyze_content("anything")

    assert analysis.can_post is False
    assert analysis.feedback == "Content was flagged but specific issues could not be determined."


def test_suggestions_for_safe_content():
    assert suggest_improvements("hello", SAFE) == ["No improvements needed. Content appears safe to post."]


def test_suggestions_follow_verdict_order():
    suggestions = suggest_improvements("text", flagged("THREAT", "TOXICITY"))

    assert suggestions == [
        "Consider revising your content to address the following issues:",
        "• Remove any language that could be perceived as threatening",
        "• Express disagreement or frustration without implying harm",
        "• Use more neutral or positive language",
        "• Express your point without aggressive or hostile tone",
    ]


def test_suggestions_two_per_known_category():
    names = ["TOXICITY", "SEVERE_TOXICITY", "IDENTITY_ATTACK", "INSULT", "PROFANITY", "THREAT"]

    suggestions = suggest_improvements("text", flagged(*names))

    assert len(suggestions) == 1 + 2 * len(names)
    assert all(line.startswith("• ") for line in suggestions[1:])


def test_suggestions_skip_categories_below_threshold():
    verdict = ModerationVerdict(
        is_problematic=True,
        categories=(
            CategoryScore("PROFANITY", 0.9, 0.8, True),
            CategoryScore("INSULT", 0.2, 0.7, False),
        ),
        score=0.9,
    )

    suggestions = suggest_improvements("text", verdict)

    assert suggestions[1:] == [
        "• Replace profanity with more appropriate language",
        "• Consider if your point can be made without strong language",
    ]


def test_suggestions_unknown_category():
    suggestions = suggest_improvements("text", flagged("SEXUALLY_EXPLICIT"))

    assert suggestions[1:] == ["• Review content for sexually explicit"]


def test_suggestions_fail_safe_has_only_header():
    verdict = ModerationVerdict(is_problematic=True, categories=(), score=1.0)

    assert suggest_improvements("text", verdict) == [
        "Consider revising your content to address the following issues:"
    ]
