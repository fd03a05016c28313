from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CategoryScore:
    name: str  # "TOXICITY" | "SEVERE_TOXICITY" | "IDENTITY_ATTACK" | ...
    score: float
    threshold: float
    exceeded: bool


@dataclass(frozen=True)
class ModerationVerdict:
    is_problematic: bool
    categories: Tuple[CategoryScore, ...]
    score: float  # highest category score, 1.0 on the fail-safe path
    message: Optional[str] = None

    @property
    def exceeded_categories(self) -> Tuple[CategoryScore, ...]:
        return tuple(c for c in self.categories if c.exceeded)


@dataclass(frozen=True)
class ContentAnalysis:
    verdict: ModerationVerdict
    feedback: str
    can_post: bool


@dataclass(frozen=True)
class OutboundPost:
    text: str
    media_ids: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class PublishResult:
    success: bool
    id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, tweet_id: str) -> "PublishResult":
        return cls(success=True, id=tweet_id)

    @classmethod
    def failed(cls, error: str) -> "PublishResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class PostDecision:
    posted: bool
    problematic: bool
    feedback: str
    tweet_id: Optional[str] = None
    error: Optional[str] = None
