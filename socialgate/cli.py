"""
Command-line entrypoint.

    socialgate analyze "some text"
    socialgate post "some text" [--force] [--media ID ...] [--upload PATH ...]
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from socialgate import config
from socialgate.engine.analyzer import analyze_content
from socialgate.engine.orchestrator import check_and_post
from socialgate.logging import configure_logging
from socialgate.services.twitter import upload_media

logger = logging.getLogger("socialgate")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="socialgate",
        description="Check content for problematic language before posting it to Twitter.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="score content without posting")
    analyze.add_argument("text")

    post = sub.add_parser("post", help="score content and post it if safe")
    post.add_argument("text")
    post.add_argument("--force", action="store_true", help="post even if the content is flagged")
    post.add_argument("--media", nargs="*", default=[], metavar="ID", help="already-uploaded media ids")
    post.add_argument("--upload", nargs="*", default=[], metavar="PATH", help="media files to upload first")
    return parser


async def _run_analyze(text: str) -> int:
    analysis = await analyze_content(text)
    print(f"- Problematic: {'Yes' if analysis.verdict.is_problematic else 'No'}")
    print(f"- Score: {analysis.verdict.score:.2f}")
    print(f"- Can Post: {'Yes' if analysis.can_post else 'No'}")
    print(f"- Feedback: {analysis.feedback}")
    return 0


async def _run_post(text: str, force: bool, media_ids: List[str], uploads: List[str]) -> int:
    media_ids = list(media_ids)
    for path in uploads:
        media_id = await upload_media(path)
        if media_id is None:
            print(f"- Upload failed, skipping: {path}")
            continue
        media_ids.append(media_id)

    decision = await check_and_post(text, force_post=force, media_ids=media_ids or None)
    print(f"- Posted: {'Yes' if decision.posted else 'No'}")
    print(f"- Problematic: {'Yes' if decision.problematic else 'No'}")
    if decision.posted:
        print(f"- Tweet ID: {decision.tweet_id}")
    if decision.error:
        print(f"- Error: {decision.error}")
    print(f"- Feedback: {decision.feedback}")
    return 0 if decision.posted else 1


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_logging(config.LOG_LEVEL)
    config.require_settings()

    if args.command == "analyze":
        code = asyncio.run(_run_analyze(args.text))
    else:
        code = asyncio.run(_run_post(args.text, args.force, args.media, args.upload))
    sys.exit(code)
