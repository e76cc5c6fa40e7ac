from __future__ import annotations

import os
from dataclasses import dataclass

from hazard_models.timeutils import parse_window


@dataclass(slots=True)
class TextMiningConfig:
    global_keywords: int
    post_keywords: int
    num_topics: int
    trend_window_hours: float
    trend_windows: int
    crisis_threshold: float
    locales: tuple[str, ...]
    lexicon_path: str | None


def _split_locales(raw: str) -> tuple[str, ...]:
    return tuple(code.strip() for code in raw.split(",") if code.strip())


def load_text_mining_config() -> TextMiningConfig:
    window = parse_window(os.getenv("TEXT_MINING_TREND_WINDOW", "24h"))
    return TextMiningConfig(
        global_keywords=int(os.getenv("TEXT_MINING_GLOBAL_KEYWORDS", "50")),
        post_keywords=int(os.getenv("TEXT_MINING_POST_KEYWORDS", "10")),
        num_topics=int(os.getenv("TEXT_MINING_NUM_TOPICS", "5")),
        trend_window_hours=window.total_seconds() / 3600.0,
        trend_windows=int(os.getenv("TEXT_MINING_TREND_WINDOWS", "7")),
        crisis_threshold=float(os.getenv("TEXT_MINING_CRISIS_THRESHOLD", "0.5")),
        locales=_split_locales(os.getenv("TEXT_MINING_LOCALES", "en,hi,ta,bn")),
        lexicon_path=os.getenv("TEXT_MINING_LEXICON_PATH") or None,
    )
