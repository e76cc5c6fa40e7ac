from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest

from hazard_models.models import CorpusAnalytics, SocialMediaPost
from processors.lexicons import Lexicons
from processors.sentiment_analyzer import SentimentAnalyzer
from text_mining.config import TextMiningConfig
from text_mining.engine import TextMiningEngine

NOW = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)
SCENARIO = "EMERGENCY!!! tsunami warning near Chennai coast, evacuate now!!"


def make_config(**overrides) -> TextMiningConfig:
    values = {
        "global_keywords": 50,
        "post_keywords": 10,
        "num_topics": 5,
        "trend_window_hours": 24.0,
        "trend_windows": 7,
        "crisis_threshold": 0.5,
        "locales": ("en",),
        "lexicon_path": None,
    }
    values.update(overrides)
    return TextMiningConfig(**values)


def make_engine(**overrides) -> TextMiningEngine:
    lexicons = Lexicons.build(
        panic_keywords=["help", "sos"],
        hazard_terms=["tsunami", "storm surge"],
        marine_locations=["Chennai coast", "Goa"],
    )
    sentiment = SentimentAnalyzer(lexicon={"help": -2.0, "calm": 2.0})
    return TextMiningEngine(make_config(**overrides), lexicons=lexicons, sentiment=sentiment)


def make_post(post_id: str, content: str, hours_ago: float = 1.0) -> SocialMediaPost:
    return SocialMediaPost(
        id=post_id,
        content=content,
        platform="twitter",
        timestamp=NOW - timedelta(hours=hours_ago),
        author_username="coast_guard_fan",
        author_follower_count=50,
    )


def _sample_posts() -> list[SocialMediaPost]:
    return [
        make_post("p1", "HELP HELP SOS!!! Chennai coast", 1),
        make_post("p2", "calm at Goa", 2),
        make_post("p3", "tsunami near Goa", 30),
    ]


def test_analyze_post_with_packaged_lexicons() -> None:
    engine = TextMiningEngine(make_config())
    result = engine.analyze_post(make_post("alert-1", SCENARIO))

    assert result.post_id == "alert-1"
    assert result.crisis_indicators.panic_score > 0.5
    assert "Chennai coast" in result.entities.locations
    assert "tsunami" in result.entities.hazard_types
    assert result.sentiment.comparative < 0
    assert result.crisis_indicators.emotion_intensity == pytest.approx(abs(result.sentiment.comparative))

    assert len(result.topics) == 1
    topic = result.topics[0]
    assert topic.id == ord("t") % 5
    assert topic.terms == ["tsunami"]
    assert topic.weight == pytest.approx(1 / 8)

    terms = [item.term for item in result.keywords]
    assert "tsunami" in terms
    assert all(item.score == 0.0 for item in result.keywords)


def test_post_without_hazard_words_has_no_topics() -> None:
    result = make_engine().analyze_post(make_post("p1", "calm at Goa"))
    assert result.topics == []


def test_analyze_post_adds_to_the_given_corpus() -> None:
    engine = make_engine()
    corpus = engine.new_corpus()

    engine.analyze_post(make_post("p1", "wave storm wave"), corpus)
    second = engine.analyze_post(make_post("p2", "storm storm"), corpus)

    assert len(corpus) == 2
    assert second.keywords[0].term == "storm"
    assert second.keywords[0].frequency == 2
    assert second.keywords[0].score == 0.0


def test_analyze_posts_shares_idf_across_the_batch() -> None:
    results = make_engine().analyze_posts(
        [make_post("p1", "wave storm wave"), make_post("p2", "storm storm")]
    )

    first = results[0].keywords
    assert [item.term for item in first] == ["wave", "storm"]
    assert first[0].score == pytest.approx(2 / 3 * math.log(2))
    assert first[0].frequency == 2
    assert [result.post_id for result in results] == ["p1", "p2"]


def test_post_keywords_are_capped() -> None:
    content = " ".join(f"term{i:02d}" for i in range(15))
    result = make_engine(post_keywords=4).analyze_post(make_post("p1", content))
    assert len(result.keywords) == 4


def test_analyze_posts_empty() -> None:
    assert make_engine().analyze_posts([]) == []


def test_detect_crisis_locations() -> None:
    hotspots = make_engine().detect_crisis_locations(_sample_posts())

    assert [item.location for item in hotspots] == ["Chennai coast"]
    assert hotspots[0].post_ids == ["p1"]
    assert hotspots[0].panic_level == pytest.approx(0.66)


def test_crisis_threshold_is_configurable() -> None:
    hotspots = make_engine(crisis_threshold=0.0).detect_crisis_locations(_sample_posts())

    assert [item.location for item in hotspots] == ["Chennai coast", "Goa"]
    assert hotspots[1].post_ids == ["p2", "p3"]


def test_analyze_corpus() -> None:
    analytics = make_engine().analyze_corpus(_sample_posts(), now=NOW)

    assert analytics.global_keywords
    assert len(analytics.global_keywords) <= 50

    assert len(analytics.emerging_topics) == 1
    topic = analytics.emerging_topics[0]
    assert topic.keywords == ["tsunami"]
    assert topic.post_ids == ["p3"]

    assert [item.location for item in analytics.crisis_hotspots] == ["Chennai coast"]

    trends = analytics.sentiment_trends
    assert [window.post_count for window in trends] == [1, 2]
    assert trends[0].avg_sentiment == pytest.approx(0.0)
    assert trends[1].avg_sentiment == pytest.approx((-0.8 + 2 / 3) / 2)
    assert trends[1].end == NOW


def test_analyze_corpus_empty() -> None:
    assert make_engine().analyze_corpus([], now=NOW) == CorpusAnalytics()


def test_single_post_keywords_rank_by_count() -> None:
    result = make_engine().analyze_post(make_post("p1", "surge flooding surge surge flooding harbour"))

    assert [item.term for item in result.keywords] == ["surge", "flooding", "harbour"]
    assert [item.frequency for item in result.keywords] == [3, 2, 1]
    assert all(item.score == 0.0 for item in result.keywords)
