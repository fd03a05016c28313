from __future__ import annotations

import logging
from typing import Optional, Sequence

from socialgate.engine.analyzer import analyze_content, suggest_improvements
from socialgate.models import OutboundPost, PostDecision
from socialgate.services.twitter import post_to_twitter

logger = logging.getLogger("socialgate")


async def check_and_post(
    content: str,
    *,
    force_post: bool = False,
    media_ids: Optional[Sequence[str]] = None,
) -> PostDecision:
    """
    Moderate content and publish it when it is safe (or when forced).

    1) score the content
    2) stop with feedback + suggestions if flagged and not forced
    3) publish, reporting the publish error if there is one

    Never raises: anything unexpected becomes a failed PostDecision.
    """
    try:
        analysis = await analyze_content(content)
        verdict = analysis.verdict

        if verdict.is_problematic and not force_post:
            suggestions = suggest_improvements(content, verdict)
            return PostDecision(
                posted=False,
                problematic=True,
                feedback=f"{analysis.feedback}\n\n" + "\n".join(suggestions),
            )

        if verdict.is_problematic:
            logger.warning(f"Force-posting flagged content: {verdict.message}")

        post = OutboundPost(
            text=content,
            media_ids=tuple(media_ids) if media_ids is not None else None,
        )
        result = await post_to_twitter(post)

        if not result.success:
            return PostDecision(
                posted=False,
                problematic=verdict.is_problematic,
                feedback=analysis.feedback,
                error=result.error,
            )

        feedback = (
            f"Content was posted despite being flagged: {analysis.feedback}"
            if verdict.is_problematic
            else "Content was posted successfully."
        )
        return PostDecision(
            posted=True,
            problematic=verdict.is_problematic,
            feedback=feedback,
            tweet_id=result.id,
        )
    except Exception as e:
        logger.exception(f"check_and_post failed: {e}")
        return PostDecision(
            posted=False,
            problematic=False,
            feedback="An error occurred while processing your request.",
            error=str(e) or "Unknown error",
        )
