from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

Accuracy = Literal["high", "medium", "low"]


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    latitude: float
    longitude: float


@dataclass(slots=True)
class ProximityResult:
    distance_m: float
    bearing_deg: float
    within_radius: bool
    accuracy: Accuracy


@dataclass(slots=True)
class NearbyCoordinate:
    coordinate: GeoCoordinate
    index: int
    proximity: ProximityResult


@dataclass(slots=True)
class ClusterPoint:
    coordinate: GeoCoordinate
    source_index: int
    distance_from_centroid_m: float


@dataclass(slots=True)
class GeoCluster:
    centroid: GeoCoordinate
    radius_m: float
    points: list[ClusterPoint] = field(default_factory=list)
    density: float = 0.0

    @property
    def size(self) -> int:
        return len(self.points)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    north: float
    south: float
    east: float
    west: float

    @property
    def center(self) -> GeoCoordinate:
        return GeoCoordinate(
            latitude=(self.north + self.south) / 2.0,
            longitude=(self.east + self.west) / 2.0,
        )

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def lon_span(self) -> float:
        return self.east - self.west


@dataclass(slots=True)
class HazardReport:
    id: str
    location: GeoCoordinate | None
    hazard_type: str
    severity: float
    timestamp: datetime
    ai_confidence: float = 0.0
    description: str | None = None


@dataclass(slots=True)
class HotspotResult:
    cluster_id: int
    centroid: GeoCoordinate
    report_count: int
    average_severity: float
    risk_score: int
    hazard_types: list[str]
    spatial_density: float
    temporal_intensity: float
    bounding_box: list[tuple[float, float]]
    confidence: float
    report_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class HotspotWindow:
    window_label: str
    start: datetime
    end: datetime
    hotspots: list[HotspotResult] = field(default_factory=list)


@dataclass(slots=True)
class HotspotMovement:
    hotspot_id: int
    displacement_km: float
    bearing_deg: float
    velocity_km_per_day: float


@dataclass(slots=True)
class EvolvingHotspots:
    current_hotspots: list[HotspotResult]
    historical_trajectory: list[HotspotWindow]
    movement_vectors: list[HotspotMovement]


@dataclass(slots=True)
class Engagement:
    likes: int = 0
    shares: int = 0
    comments: int = 0

    @property
    def total(self) -> int:
        return self.likes + self.shares + self.comments


@dataclass(slots=True)
class SocialMediaPost:
    id: str
    content: str
    platform: str
    timestamp: datetime
    author_username: str
    author_follower_count: int = 0
    engagement: Engagement | None = None


@dataclass(slots=True)
class TermScore:
    term: str
    tfidf: float
    count: int


@dataclass(slots=True)
class KeywordScore:
    term: str
    score: float
    frequency: int


@dataclass(slots=True)
class Topic:
    id: int
    terms: list[str]
    weight: float


@dataclass(slots=True)
class SentimentResult:
    score: float
    comparative: float
    tokens: list[str] = field(default_factory=list)
    positive: list[str] = field(default_factory=list)
    negative: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CrisisIndicators:
    panic_score: float
    urgency_score: float
    emotion_intensity: float
    credibility_score: float


@dataclass(slots=True)
class ExtractedEntities:
    locations: list[str] = field(default_factory=list)
    hazard_types: list[str] = field(default_factory=list)
    marine_terms: list[str] = field(default_factory=list)
    time_references: list[str] = field(default_factory=list)


@dataclass(slots=True)
class TextMiningResult:
    post_id: str
    keywords: list[KeywordScore]
    topics: list[Topic]
    sentiment: SentimentResult
    crisis_indicators: CrisisIndicators
    entities: ExtractedEntities


@dataclass(slots=True)
class GlobalKeyword:
    term: str
    score: float
    occurrences: int


@dataclass(slots=True)
class EmergingTopic:
    topic_id: int
    keywords: list[str]
    post_count: int
    post_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CrisisHotspot:
    location: str
    panic_level: float
    post_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SentimentWindow:
    window_label: str
    start: datetime
    end: datetime
    avg_sentiment: float
    volatility: float
    post_count: int


@dataclass(slots=True)
class CorpusAnalytics:
    global_keywords: list[GlobalKeyword] = field(default_factory=list)
    emerging_topics: list[EmergingTopic] = field(default_factory=list)
    crisis_hotspots: list[CrisisHotspot] = field(default_factory=list)
    sentiment_trends: list[SentimentWindow] = field(default_factory=list)
