from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field

from . import models
from .timeutils import datetime_to_epoch_millis, epoch_millis_to_datetime


class WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GeoCoordinateValue(WireModel):
    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, coordinate: models.GeoCoordinate) -> "GeoCoordinateValue":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)

    def to_domain(self) -> models.GeoCoordinate:
        return models.GeoCoordinate(latitude=self.latitude, longitude=self.longitude)


class ProximityResultValue(WireModel):
    distance_m: float
    bearing_deg: float
    within_radius: bool
    accuracy: models.Accuracy

    @classmethod
    def from_domain(cls, result: models.ProximityResult) -> "ProximityResultValue":
        return cls(**asdict(result))


class ClusterPointValue(WireModel):
    coordinate: GeoCoordinateValue
    source_index: int
    distance_from_centroid_m: float

    @classmethod
    def from_domain(cls, point: models.ClusterPoint) -> "ClusterPointValue":
        return cls(
            coordinate=GeoCoordinateValue.from_domain(point.coordinate),
            source_index=point.source_index,
            distance_from_centroid_m=point.distance_from_centroid_m,
        )


class GeoClusterValue(WireModel):
    centroid: GeoCoordinateValue
    radius_m: float
    points: list[ClusterPointValue] = Field(default_factory=list)
    density: float = Field(description="points per square kilometre")

    @classmethod
    def from_domain(cls, cluster: models.GeoCluster) -> "GeoClusterValue":
        return cls(
            centroid=GeoCoordinateValue.from_domain(cluster.centroid),
            radius_m=cluster.radius_m,
            points=[ClusterPointValue.from_domain(item) for item in cluster.points],
            density=cluster.density,
        )


class HazardReportValue(WireModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    lat: float | None = None
    lng: float | None = None
    hazard_type: str = "unknown"
    severity: float = 1.0
    timestamp: int = Field(description="timestamp-millis")
    ai_confidence: float = 0.0
    description: str | None = None

    def to_domain(self) -> models.HazardReport:
        location = None
        if self.lat is not None and self.lng is not None:
            location = models.GeoCoordinate(latitude=self.lat, longitude=self.lng)
        return models.HazardReport(
            id=self.id,
            location=location,
            hazard_type=self.hazard_type,
            severity=self.severity,
            timestamp=epoch_millis_to_datetime(self.timestamp),
            ai_confidence=self.ai_confidence,
            description=self.description,
        )


class HotspotResultValue(WireModel):
    cluster_id: int
    centroid: GeoCoordinateValue
    report_count: int
    average_severity: float
    risk_score: int
    hazard_types: list[str]
    spatial_density: float
    temporal_intensity: float
    bounding_box: list[tuple[float, float]] = Field(description="closed [lng, lat] ring")
    confidence: float
    report_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, hotspot: models.HotspotResult) -> "HotspotResultValue":
        return cls(
            cluster_id=hotspot.cluster_id,
            centroid=GeoCoordinateValue.from_domain(hotspot.centroid),
            report_count=hotspot.report_count,
            average_severity=hotspot.average_severity,
            risk_score=hotspot.risk_score,
            hazard_types=list(hotspot.hazard_types),
            spatial_density=hotspot.spatial_density,
            temporal_intensity=hotspot.temporal_intensity,
            bounding_box=list(hotspot.bounding_box),
            confidence=hotspot.confidence,
            report_ids=list(hotspot.report_ids),
        )


class EngagementValue(WireModel):
    likes: int = 0
    shares: int = 0
    comments: int = 0


class SocialMediaPostValue(WireModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    content: str
    platform: str
    timestamp: int = Field(description="timestamp-millis")
    author_username: str
    author_follower_count: int = 0
    engagement: EngagementValue | None = None

    @classmethod
    def from_domain(cls, post: models.SocialMediaPost) -> "SocialMediaPostValue":
        engagement = None
        if post.engagement is not None:
            engagement = EngagementValue(**asdict(post.engagement))
        return cls(
            id=post.id,
            content=post.content,
            platform=post.platform,
            timestamp=datetime_to_epoch_millis(post.timestamp),
            author_username=post.author_username,
            author_follower_count=post.author_follower_count,
            engagement=engagement,
        )

    def to_domain(self) -> models.SocialMediaPost:
        engagement = None
        if self.engagement is not None:
            engagement = models.Engagement(**self.engagement.model_dump())
        return models.SocialMediaPost(
            id=self.id,
            content=self.content,
            platform=self.platform,
            timestamp=epoch_millis_to_datetime(self.timestamp),
            author_username=self.author_username,
            author_follower_count=self.author_follower_count,
            engagement=engagement,
        )


class KeywordScoreValue(WireModel):
    term: str
    score: float
    frequency: int


class TopicValue(WireModel):
    id: int
    terms: list[str]
    weight: float


class SentimentResultValue(WireModel):
    score: float
    comparative: float
    tokens: list[str] = Field(default_factory=list)
    positive: list[str] = Field(default_factory=list)
    negative: list[str] = Field(default_factory=list)


class CrisisIndicatorsValue(WireModel):
    panic_score: float
    urgency_score: float
    emotion_intensity: float
    credibility_score: float


class ExtractedEntitiesValue(WireModel):
    locations: list[str] = Field(default_factory=list)
    hazard_types: list[str] = Field(default_factory=list)
    marine_terms: list[str] = Field(default_factory=list)
    time_references: list[str] = Field(default_factory=list)


class TextMiningResultValue(WireModel):
    post_id: str
    keywords: list[KeywordScoreValue]
    topics: list[TopicValue]
    sentiment: SentimentResultValue
    crisis_indicators: CrisisIndicatorsValue
    entities: ExtractedEntitiesValue

    @classmethod
    def from_domain(cls, result: models.TextMiningResult) -> "TextMiningResultValue":
        return cls(
            post_id=result.post_id,
            keywords=[KeywordScoreValue(**asdict(item)) for item in result.keywords],
            topics=[TopicValue(**asdict(item)) for item in result.topics],
            sentiment=SentimentResultValue(**asdict(result.sentiment)),
            crisis_indicators=CrisisIndicatorsValue(**asdict(result.crisis_indicators)),
            entities=ExtractedEntitiesValue(**asdict(result.entities)),
        )


class GlobalKeywordValue(WireModel):
    term: str
    score: float
    occurrences: int


class EmergingTopicValue(WireModel):
    topic_id: int
    keywords: list[str]
    post_count: int
    post_ids: list[str] = Field(default_factory=list)


class CrisisHotspotValue(WireModel):
    location: str
    panic_level: float
    post_ids: list[str] = Field(default_factory=list)


class SentimentWindowValue(WireModel):
    window_label: str
    start: int = Field(description="timestamp-millis")
    end: int = Field(description="timestamp-millis")
    avg_sentiment: float
    volatility: float
    post_count: int

    @classmethod
    def from_domain(cls, window: models.SentimentWindow) -> "SentimentWindowValue":
        return cls(
            window_label=window.window_label,
            start=datetime_to_epoch_millis(window.start),
            end=datetime_to_epoch_millis(window.end),
            avg_sentiment=window.avg_sentiment,
            volatility=window.volatility,
            post_count=window.post_count,
        )


class CorpusAnalyticsValue(WireModel):
    global_keywords: list[GlobalKeywordValue] = Field(default_factory=list)
    emerging_topics: list[EmergingTopicValue] = Field(default_factory=list)
    crisis_hotspots: list[CrisisHotspotValue] = Field(default_factory=list)
    sentiment_trends: list[SentimentWindowValue] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, analytics: models.CorpusAnalytics) -> "CorpusAnalyticsValue":
        return cls(
            global_keywords=[GlobalKeywordValue(**asdict(item)) for item in analytics.global_keywords],
            emerging_topics=[EmergingTopicValue(**asdict(item)) for item in analytics.emerging_topics],
            crisis_hotspots=[CrisisHotspotValue(**asdict(item)) for item in analytics.crisis_hotspots],
            sentiment_trends=[SentimentWindowValue.from_domain(item) for item in analytics.sentiment_trends],
        )
