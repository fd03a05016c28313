"""
Perspective API moderation client.
Scores text against a fixed set of toxicity categories and fails closed:
if the scorer cannot be reached, content is treated as problematic.
"""
from __future__ import annotations

import logging
from typing import Dict, List

import httpx

from socialgate import config
from socialgate.models import CategoryScore, ModerationVerdict

logger = logging.getLogger("socialgate")

# Category -> threshold. Order here is the order categories appear in a verdict.
CATEGORIES: Dict[str, float] = {
    "TOXICITY": 0.7,
    "SEVERE_TOXICITY": 0.5,
    "IDENTITY_ATTACK": 0.5,
    "INSULT": 0.7,
    "PROFANITY": 0.8,
    "THREAT": 0.5,
}

CATEGORY_EXPLANATIONS: Dict[str, str] = {
    "TOXICITY": "toxic or rude language",
    "SEVERE_TOXICITY": "very hateful, aggressive, or disrespectful language",
    "IDENTITY_ATTACK": "negative or hateful comments targeting identity",
    "INSULT": "insulting or negative comments",
    "PROFANITY": "swear words, curse words, or other obscene language",
    "THREAT": "threatening language or content that suggests violence",
}

FAIL_SAFE_MESSAGE = "Error checking content. To be safe, content is flagged as potentially problematic."


def humanize_category(name: str) -> str:
    """TOXICITY -> 'toxicity', SEVERE_TOXICITY -> 'severe toxicity'."""
    return name.lower().replace("_", " ")


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT)


def _build_request_body(text: str) -> Dict:
    return {
        "comment": {"text": text},
        "languages": ["en"],
        "requestedAttributes": {name: {} for name in CATEGORIES},
    }


def _score_categories(payload: Dict) -> List[CategoryScore]:
    # A missing attributeScores block means the payload is malformed;
    # a missing individual category just scores 0.
    attribute_scores = payload["attributeScores"]
    categories = []
    for name, threshold in CATEGORIES.items():
        summary = (attribute_scores.get(name) or {}).get("summaryScore") or {}
        score = float(summary.get("value") or 0)
        categories.append(CategoryScore(
            name=name,
            score=score,
            threshold=threshold,
            exceeded=score >= threshold,
        ))
    return categories


async def check_content(text: str) -> ModerationVerdict:
    """
    Score text with the Perspective API.

    Empty (or whitespace-only) text is never sent to the scorer. Any failure
    talking to the scorer yields a problematic verdict with score 1.
    """
    if not text.strip():
        return ModerationVerdict(
            is_problematic=False,
            categories=(),
            score=0.0,
            message="Empty content",
        )

    try:
        async with _client() as client:
            response = await client.post(
                config.PERSPECTIVE_API_URL,
                params={"key": config.PERSPECTIVE_API_KEY},
                json=_build_request_body(text),
            )
            response.raise_for_status()
            categories = _score_categories(response.json())
    except Exception as e:
        logger.error(f"Error checking content: {e!r}")
        return ModerationVerdict(
            is_problematic=True,
            categories=(),
            score=1.0,
            message=FAIL_SAFE_MESSAGE,
        )

    flagged = [c for c in categories if c.exceeded]
    highest = max((c.score for c in categories), default=0.0)

    if flagged:
        message = "Content flagged for: " + ", ".join(humanize_category(c.name) for c in flagged)
        logger.info(f"Content flagged (score={highest:.2f}): {[c.name for c in flagged]}")
    else:
        message = "Content appears safe"

    return ModerationVerdict(
        is_problematic=bool(flagged),
        categories=tuple(categories),
        score=highest,
        message=message,
    )


def explain_content_issues(verdict: ModerationVerdict) -> str:
    """Human-readable explanation of why content was flagged."""
    if not verdict.is_problematic:
        return "No issues detected with this content."

    flagged = verdict.exceeded_categories
    if not flagged:
        return "Content was flagged but specific issues could not be determined."

    issues = [
        f"{CATEGORY_EXPLANATIONS.get(c.name, humanize_category(c.name))} (score: {c.score:.2f})"
        for c in flagged
    ]
    return f"This content may contain: {', '.join(issues)}. Consider revising before posting."
