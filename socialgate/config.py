"""
Configuration for the moderated posting gate.
Loads credentials from the environment (or a local .env file).
"""
import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("socialgate")

# ============================================================================
# CREDENTIALS
# ============================================================================
TWITTER_API_KEY = os.getenv("TWITTER_API_KEY", "")
TWITTER_API_SECRET = os.getenv("TWITTER_API_SECRET", "")
TWITTER_ACCESS_TOKEN = os.getenv("TWITTER_ACCESS_TOKEN", "")
TWITTER_ACCESS_SECRET = os.getenv("TWITTER_ACCESS_SECRET", "")
PERSPECTIVE_API_KEY = os.getenv("PERSPECTIVE_API_KEY", "")

REQUIRED_ENV_VARS = [
    "TWITTER_API_KEY",
    "TWITTER_API_SECRET",
    "TWITTER_ACCESS_TOKEN",
    "TWITTER_ACCESS_SECRET",
    "PERSPECTIVE_API_KEY",
]

# ============================================================================
# ENDPOINTS & TRANSPORT
# ============================================================================
PERSPECTIVE_API_URL = "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"
TWITTER_TWEET_URL = "https://api.twitter.com/2/tweets"
TWITTER_UPLOAD_URL = "https://upload.twitter.com/1.1/media/upload.json"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))  # seconds
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Twitter limits
MAX_TWEET_LENGTH = 280
MAX_MEDIA_ITEMS = 4


def missing_settings() -> List[str]:
    """Names of required credentials that are empty, as loaded into this module."""
    return [name for name in REQUIRED_ENV_VARS if not globals()[name]]


def require_settings() -> None:
    """Exit the process when any required credential is absent."""
    missing = missing_settings()
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        logger.error("Please check your .env file")
        raise SystemExit(1)
