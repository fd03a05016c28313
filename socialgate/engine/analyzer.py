from __future__ import annotations

from typing import Dict, List, Tuple

from socialgate.models import ContentAnalysis, ModerationVerdict
from socialgate.services.moderation import check_content, explain_content_issues, humanize_category


_TONE_SUGGESTIONS = (
    "• Use more neutral or positive language",
    "• Express your point without aggressive or hostile tone",
)

CATEGORY_SUGGESTIONS: Dict[str, Tuple[str, str]] = {
    "TOXICITY": _TONE_SUGGESTIONS,
    "SEVERE_TOXICITY": _TONE_SUGGESTIONS,
    "IDENTITY_ATTACK": (
        "• Avoid references to identity characteristics (race, gender, religion, etc.)",
        "• Focus on ideas rather than personal attributes",
    ),
    "INSULT": (
        "• Rephrase critical points constructively",
        "• Focus on actions or ideas rather than personal attacks",
    ),
    "PROFANITY": (
        "• Replace profanity with more appropriate language",
        "• Consider if your point can be made without strong language",
    ),
    "THREAT": (
        "• Remove any language that could be perceived as threatening",
        "• Express disagreement or frustration without implying harm",
    ),
}


async def analyze_content(text: str) -> ContentAnalysis:
    """
    Score the text and turn the verdict into posting feedback.

    can_post is simply the inverse of the verdict; forcing a post is the
    orchestrator's decision, not the analyzer's.
    """
    verdict = await check_content(text)
    feedback = explain_content_issues(verdict) if verdict.is_problematic else "Content appears safe to post."
    return ContentAnalysis(
        verdict=verdict,
        feedback=feedback,
        can_post=not verdict.is_problematic,
    )


def suggest_improvements(text: str, verdict: ModerationVerdict) -> List[str]:
    if not verdict.is_problematic:
        return ["No improvements needed. Content appears safe to post."]

    suggestions = ["Consider revising your content to address the following issues:"]
    for category in verdict.exceeded_categories:
        specific = CATEGORY_SUGGESTIONS.get(category.name)
        if specific:
            suggestions.extend(specific)
        else:
            suggestions.append(f"• Review content for {humanize_category(category.name)}")
    return suggestions
