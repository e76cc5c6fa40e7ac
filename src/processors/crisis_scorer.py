from __future__ import annotations

import re
from dataclasses import dataclass

from hazard_models.models import CrisisIndicators, SentimentResult, SocialMediaPost

from .lexicons import Lexicons
from .sentiment_analyzer import SentimentAnalyzer
from .tokenizer import tokenize

# Panic weights; each factor is clipped to [0, 1] before weighting.
_W_SENTIMENT = 0.25
_W_EXCLAIM = 0.20
_W_KEYWORDS = 0.30
_W_EMOJI = 0.15
_W_CAPS = 0.10

_EXCLAIM_SCALE = 100.0
_EMOJI_SATURATION = 3.0
_CAPS_SCALE = 2.0
_URGENCY_SATURATION = 3.0

_BASE_CREDIBILITY = 0.5
_FOLLOWER_TIERS = ((10_000, 0.2), (100_000, 0.1))
_ENGAGEMENT_TIERS = ((100, 0.1), (1_000, 0.1))

_CAPITALS = re.compile(r"[A-Z]")


def _clip(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(slots=True)
class PanicSignals:
    sentiment_velocity: float
    exclaim_density: float
    panic_keyword_ratio: float
    emoji_count: int
    capital_ratio: float


def compute_panic_score(signals: PanicSignals) -> float:
    score = (
        _W_SENTIMENT * _clip(signals.sentiment_velocity)
        + _W_EXCLAIM * _clip(signals.exclaim_density * _EXCLAIM_SCALE)
        + _W_KEYWORDS * _clip(signals.panic_keyword_ratio)
        + _W_EMOJI * _clip(signals.emoji_count / _EMOJI_SATURATION)
        + _W_CAPS * _clip(signals.capital_ratio * _CAPS_SCALE)
    )
    return _clip(score)


class CrisisScorer:
    """Heuristic distress signals for a single post.

    None of these are calibrated models: panic mixes sentiment magnitude with
    punctuation, keyword, emoji and shouting cues; credibility only rewards
    audience size and engagement volume.
    """

    def __init__(self, lexicons: Lexicons, sentiment: SentimentAnalyzer) -> None:
        self.lexicons = lexicons
        self.sentiment = sentiment

    def panic_signals(self, content: str | None, sentiment: SentimentResult | None = None) -> PanicSignals:
        length = len(content or "")
        if length == 0:
            return PanicSignals(0.0, 0.0, 0.0, 0, 0.0)
        tokens = tokenize(content) or []
        analysed = sentiment or self.sentiment.score(content)

        panic_hits = sum(1 for token in tokens if token in self.lexicons.panic_keywords)
        return PanicSignals(
            sentiment_velocity=abs(analysed.comparative),
            exclaim_density=content.count("!") / length,
            panic_keyword_ratio=panic_hits / max(len(tokens), 1),
            emoji_count=sum(1 for char in content if char in self.lexicons.crisis_emojis),
            capital_ratio=len(_CAPITALS.findall(content)) / length,
        )

    def panic_score(
        self,
        post: SocialMediaPost | str | None,
        sentiment: SentimentResult | None = None,
    ) -> float:
        content = post.content if isinstance(post, SocialMediaPost) else post
        if not content:
            return 0.0
        return compute_panic_score(self.panic_signals(content, sentiment))

    def urgency_score(self, text: str | None) -> float:
        tokens = tokenize(text) or []
        hits = sum(1 for token in tokens if token in self.lexicons.urgency_keywords)
        return min(hits / _URGENCY_SATURATION, 1.0)

    @staticmethod
    def credibility_score(post: SocialMediaPost) -> float:
        score = _BASE_CREDIBILITY
        for threshold, bonus in _FOLLOWER_TIERS:
            if post.author_follower_count > threshold:
                score += bonus

        if post.engagement is not None:
            total = post.engagement.total
            for threshold, bonus in _ENGAGEMENT_TIERS:
                if total > threshold:
                    score += bonus

        return min(score, 1.0)

    def indicators(self, post: SocialMediaPost, sentiment: SentimentResult | None = None) -> CrisisIndicators:
        analysed = sentiment or self.sentiment.score(post.content)
        return CrisisIndicators(
            panic_score=self.panic_score(post, analysed),
            urgency_score=self.urgency_score(post.content),
            emotion_intensity=abs(analysed.comparative),
            credibility_score=self.credibility_score(post),
        )
