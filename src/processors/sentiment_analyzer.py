from __future__ import annotations

from collections.abc import Mapping

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from hazard_models.models import SentimentResult

from .tokenizer import tokenize


class SentimentAnalyzer:
    """Word-valence sentiment scorer with batch scoring support.

    `score` is the sum of token valences and `comparative` is that sum divided by
    the token count. Valences come from the VADER lexicon unless a substitute is
    given; `extras` override individual words (domain and non-English terms).
    """

    def __init__(
        self,
        lexicon: Mapping[str, float] | None = None,
        extras: Mapping[str, float] | None = None,
    ) -> None:
        base = lexicon if lexicon is not None else SentimentIntensityAnalyzer().lexicon
        self._valences: dict[str, float] = {word.lower(): float(value) for word, value in base.items()}
        if extras:
            self._valences.update({word.lower(): float(value) for word, value in extras.items()})

    def valence(self, token: str) -> float:
        return self._valences.get(token, 0.0)

    def score(self, text: str | None) -> SentimentResult:
        tokens = tokenize(text) or []
        total = 0.0
        positive: list[str] = []
        negative: list[str] = []
        for token in tokens:
            value = self._valences.get(token)
            if not value:
                continue
            total += value
            (positive if value > 0 else negative).append(token)

        comparative = total / len(tokens) if tokens else 0.0
        return SentimentResult(
            score=total,
            comparative=comparative,
            tokens=tokens,
            positive=positive,
            negative=negative,
        )

    def score_batch(self, texts: list[str | None]) -> list[SentimentResult]:
        if not texts:
            return []
        return [self.score(text) for text in texts]
