"""
Twitter/X publishing client.
Validates a post locally, then publishes it through the v2 tweets endpoint
with OAuth 1.0a user-context credentials.
"""
from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path
from typing import Dict, Optional

import httpx
from authlib.integrations.httpx_client import AsyncOAuth1Client

from socialgate import config
from socialgate.models import OutboundPost, PublishResult

logger = logging.getLogger("socialgate")


def _client() -> httpx.AsyncClient:
    return AsyncOAuth1Client(
        client_id=config.TWITTER_API_KEY,
        client_secret=config.TWITTER_API_SECRET,
        token=config.TWITTER_ACCESS_TOKEN,
        token_secret=config.TWITTER_ACCESS_SECRET,
        # JSON bodies are not part of the OAuth1 signature; keep them on the request.
        force_include_body=True,
        timeout=config.REQUEST_TIMEOUT,
    )


def validate_post(post: OutboundPost) -> Optional[str]:
    """Return an error message if the post cannot be published, else None."""
    if not post.text or not post.text.strip():
        return "Post text cannot be empty"
    if len(post.text) > config.MAX_TWEET_LENGTH:
        return (
            f"Post exceeds Twitter's {config.MAX_TWEET_LENGTH} character limit "
            f"({len(post.text)} characters)"
        )
    return None


def build_tweet_payload(post: OutboundPost) -> Dict:
    payload: Dict = {"text": post.text}
    if post.media_ids:
        # Twitter accepts 1-4 media items; anything past the 4th is dropped.
        payload["media"] = {"media_ids": list(post.media_ids[:config.MAX_MEDIA_ITEMS])}
    return payload


def _describe_error(error: Exception) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            body = response.json()
        except ValueError:
            body = {}
        detail = (body.get("detail") or body.get("title")) if isinstance(body, dict) else None
        return f"Twitter API error {response.status_code}: {detail or response.reason_phrase}"
    return str(error) or "Unknown error occurred while posting to Twitter"


async def post_to_twitter(post: OutboundPost) -> PublishResult:
    """
    Publish a tweet.

    Validation failures and API errors are returned as a failed
    PublishResult, never raised.
    """
    problem = validate_post(post)
    if problem:
        return PublishResult.failed(problem)

    try:
        async with _client() as client:
            response = await client.post(config.TWITTER_TWEET_URL, json=build_tweet_payload(post))
            response.raise_for_status()
            tweet_id = str(response.json()["data"]["id"])
    except Exception as e:
        logger.error(f"Error posting to Twitter: {e!r}")
        return PublishResult.failed(_describe_error(e))

    logger.info(f"Tweet posted: {tweet_id}")
    return PublishResult.ok(tweet_id)


async def upload_media(media_path: str) -> Optional[str]:
    """
    Upload a media file for use in a tweet.
    Returns the media id string, or None if the upload failed.
    """
    try:
        raw = await asyncio.to_thread(Path(media_path).read_bytes)
        async with _client() as client:
            response = await client.post(
                config.TWITTER_UPLOAD_URL,
                data={"media_data": base64.b64encode(raw).decode("ascii")},
            )
            response.raise_for_status()
            return str(response.json()["media_id_string"])
    except Exception as e:
        logger.error(f"Error uploading media to Twitter ({media_path}): {e!r}")
        return None
