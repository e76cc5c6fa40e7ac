from .models import (
    BoundingBox,
    ClusterPoint,
    CorpusAnalytics,
    CrisisHotspot,
    CrisisIndicators,
    EmergingTopic,
    Engagement,
    EvolvingHotspots,
    ExtractedEntities,
    GeoCluster,
    GeoCoordinate,
    GlobalKeyword,
    HazardReport,
    HotspotMovement,
    HotspotResult,
    HotspotWindow,
    KeywordScore,
    NearbyCoordinate,
    ProximityResult,
    SentimentResult,
    SentimentWindow,
    SocialMediaPost,
    TermScore,
    TextMiningResult,
    Topic,
)
from .wire_models import (
    CorpusAnalyticsValue,
    GeoClusterValue,
    GeoCoordinateValue,
    HazardReportValue,
    HotspotResultValue,
    ProximityResultValue,
    SocialMediaPostValue,
    TextMiningResultValue,
)

__all__ = [
    "BoundingBox",
    "ClusterPoint",
    "CorpusAnalytics",
    "CorpusAnalyticsValue",
    "CrisisHotspot",
    "CrisisIndicators",
    "EmergingTopic",
    "Engagement",
    "EvolvingHotspots",
    "ExtractedEntities",
    "GeoCluster",
    "GeoClusterValue",
    "GeoCoordinate",
    "GeoCoordinateValue",
    "GlobalKeyword",
    "HazardReport",
    "HazardReportValue",
    "HotspotMovement",
    "HotspotResult",
    "HotspotResultValue",
    "HotspotWindow",
    "KeywordScore",
    "NearbyCoordinate",
    "ProximityResult",
    "ProximityResultValue",
    "SentimentResult",
    "SentimentWindow",
    "SocialMediaPost",
    "SocialMediaPostValue",
    "TermScore",
    "TextMiningResult",
    "TextMiningResultValue",
    "Topic",
]
