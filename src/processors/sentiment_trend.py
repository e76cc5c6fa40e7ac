from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timedelta

from hazard_models.models import SentimentWindow, SocialMediaPost
from hazard_models.timeutils import as_utc, utc_now

from .sentiment_analyzer import SentimentAnalyzer


class SentimentTrendAnalyzer:
    """Mean and volatility of comparative sentiment over fixed windows ending at now."""

    def __init__(self, sentiment: SentimentAnalyzer, window_count: int = 7) -> None:
        if window_count <= 0:
            raise ValueError("window_count must be positive")
        self.sentiment = sentiment
        self.window_count = window_count

    def trend(
        self,
        posts: Sequence[SocialMediaPost],
        window_hours: float,
        now: datetime | None = None,
        comparatives: Sequence[float] | None = None,
    ) -> list[SentimentWindow]:
        """Non-empty windows among the last `window_count`, oldest first.

        Windows are half-open `[start, end)`. `comparatives`, when given, must line
        up with `posts` and saves re-scoring them.
        """
        if window_hours <= 0:
            raise ValueError("window_hours must be positive")
        if not posts:
            return []
        if comparatives is not None and len(comparatives) != len(posts):
            raise ValueError("posts and comparatives must have equal length")

        scores = (
            list(comparatives)
            if comparatives is not None
            else [item.comparative for item in self.sentiment.score_batch([p.content for p in posts])]
        )
        stamped = [(as_utc(post.timestamp), score) for post, score in zip(posts, scores)]

        current = as_utc(now) if now else utc_now()
        width = timedelta(hours=window_hours)

        windows: list[SentimentWindow] = []
        for i in range(self.window_count):
            end = current - i * width
            start = end - width
            values = [score for ts, score in stamped if start <= ts < end]
            if not values:
                continue

            mean = sum(values) / len(values)
            variance = sum((value - mean) ** 2 for value in values) / len(values)
            windows.append(
                SentimentWindow(
                    window_label=f"{start.isoformat()} to {end.isoformat()}",
                    start=start,
                    end=end,
                    avg_sentiment=mean,
                    volatility=math.sqrt(variance),
                    post_count=len(values),
                )
            )

        windows.reverse()
        return windows
