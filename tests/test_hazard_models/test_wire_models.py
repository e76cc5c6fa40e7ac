from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from geospatial.clustering import cluster_coordinates
from geospatial.config import HotspotConfig
from geospatial.distance import proximity
from geospatial.hotspots import detect_hotspots
from hazard_models.models import (
    CorpusAnalytics,
    CrisisIndicators,
    Engagement,
    ExtractedEntities,
    GeoCoordinate,
    HazardReport,
    KeywordScore,
    SentimentResult,
    SentimentWindow,
    SocialMediaPost,
    TextMiningResult,
    Topic,
)
from hazard_models.wire_models import (
    CorpusAnalyticsValue,
    GeoClusterValue,
    GeoCoordinateValue,
    HazardReportValue,
    HotspotResultValue,
    ProximityResultValue,
    SocialMediaPostValue,
    TextMiningResultValue,
)

NOW_MS = 1_736_510_400_000
NOW = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)


def _sample_result() -> TextMiningResult:
    return TextMiningResult(
        post_id="p1",
        keywords=[KeywordScore(term="tsunami", score=0.4, frequency=2)],
        topics=[Topic(id=1, terms=["tsunami"], weight=0.25)],
        sentiment=SentimentResult(score=-3.0, comparative=-0.75, tokens=["tsunami"], negative=["tsunami"]),
        crisis_indicators=CrisisIndicators(
            panic_score=0.6,
            urgency_score=0.3,
            emotion_intensity=0.75,
            credibility_score=0.5,
        ),
        entities=ExtractedEntities(locations=["Goa"], hazard_types=["tsunami"]),
    )


def test_social_media_post_from_payload() -> None:
    payload = {
        "id": "p1",
        "content": "High waves at Goa",
        "platform": "twitter",
        "timestamp": NOW_MS,
        "author_username": "goa_fisher",
        "author_follower_count": 1200,
        "engagement": {"likes": 10, "shares": 2, "comments": 1},
        "language": "en",
    }

    post = SocialMediaPostValue.model_validate(payload).to_domain()

    assert post.timestamp == NOW
    assert post.engagement == Engagement(likes=10, shares=2, comments=1)
    assert post.engagement.total == 13


def test_social_media_post_round_trip_keeps_millis() -> None:
    post = SocialMediaPost(
        id="p2",
        content="calm",
        platform="reddit",
        timestamp=NOW,
        author_username="sailor",
    )
    value = SocialMediaPostValue.from_domain(post)

    assert value.timestamp == NOW_MS
    assert value.engagement is None
    assert value.to_domain() == post


def test_social_media_post_requires_content() -> None:
    with pytest.raises(ValidationError):
        SocialMediaPostValue.model_validate({"id": "p1", "platform": "x", "timestamp": NOW_MS, "author_username": "a"})


def test_hazard_report_payload() -> None:
    report = HazardReportValue.model_validate(
        {"id": "r1", "lat": 13.08, "lng": 80.27, "severity": 4, "timestamp": NOW_MS, "reporter": "u1"}
    ).to_domain()

    assert report.location == GeoCoordinate(13.08, 80.27)
    assert report.hazard_type == "unknown"
    assert report.timestamp == NOW

    missing = HazardReportValue.model_validate({"id": "r2", "timestamp": NOW_MS}).to_domain()
    assert missing.location is None


def test_text_mining_result_serializes() -> None:
    payload = TextMiningResultValue.from_domain(_sample_result()).model_dump()

    assert payload["keywords"] == [{"term": "tsunami", "score": 0.4, "frequency": 2}]
    assert payload["topics"] == [{"id": 1, "terms": ["tsunami"], "weight": 0.25}]
    assert payload["sentiment"]["negative"] == ["tsunami"]
    assert payload["crisis_indicators"]["panic_score"] == 0.6
    assert payload["entities"]["locations"] == ["Goa"]


def test_corpus_analytics_windows_use_epoch_millis() -> None:
    analytics = CorpusAnalytics(
        sentiment_trends=[
            SentimentWindow(
                window_label="w",
                start=datetime(2025, 1, 9, 12, 0, tzinfo=timezone.utc),
                end=NOW,
                avg_sentiment=-0.2,
                volatility=0.1,
                post_count=3,
            )
        ]
    )

    payload = CorpusAnalyticsValue.from_domain(analytics).model_dump()

    assert payload["sentiment_trends"][0]["end"] == NOW_MS
    assert payload["sentiment_trends"][0]["start"] == NOW_MS - 86_400_000
    assert payload["global_keywords"] == []


def test_geo_cluster_serializes() -> None:
    cluster = cluster_coordinates([GeoCoordinate(19.0, 72.8), GeoCoordinate(19.001, 72.801)], 200.0)[0]
    payload = GeoClusterValue.from_domain(cluster).model_dump()

    assert len(payload["points"]) == 2
    assert payload["centroid"]["latitude"] == pytest.approx(19.0005, abs=1e-4)
    assert GeoCoordinateValue(**payload["centroid"]).to_domain() == cluster.centroid


def test_wire_models_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        GeoCoordinateValue.model_validate({"latitude": 1.0, "longitude": 2.0, "altitude": 3.0})


def test_hotspot_and_proximity_serialize() -> None:
    reports = [
        HazardReport(
            id=f"r{i}",
            location=GeoCoordinate(13.0 + i * 0.01, 80.0),
            hazard_type="high waves",
            severity=3,
            timestamp=NOW - timedelta(hours=i + 1),
            ai_confidence=0.5,
        )
        for i in range(3)
    ]
    cfg = HotspotConfig(radius_m=55_000, min_points=3, time_window_hours=72, evolution_intervals=7, match_distance_km=100)

    payload = HotspotResultValue.from_domain(detect_hotspots(reports, cfg, now=NOW)[0]).model_dump()
    assert payload["report_count"] == 3
    assert payload["hazard_types"] == ["high waves"]
    assert payload["bounding_box"][0] == payload["bounding_box"][-1]

    result = ProximityResultValue.from_domain(proximity(GeoCoordinate(13.0, 80.0), GeoCoordinate(13.0, 80.0)))
    assert result.distance_m == 0.0
    assert result.within_radius is True
