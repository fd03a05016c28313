"""
Moderated posting gate: score text with Perspective, publish to Twitter if safe.
"""
from socialgate.engine.analyzer import analyze_content, suggest_improvements
from socialgate.engine.orchestrator import check_and_post
from socialgate.services.moderation import check_content, explain_content_issues
from socialgate.services.twitter import post_to_twitter, upload_media

__all__ = [
    'analyze_content',
    'check_and_post',
    'check_content',
    'explain_content_issues',
    'post_to_twitter',
    'suggest_improvements',
    'upload_media',
]
