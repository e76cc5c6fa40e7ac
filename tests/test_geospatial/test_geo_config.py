from __future__ import annotations

from geospatial.config import load_geo_config, load_hotspot_config


def test_geo_config_defaults(monkeypatch) -> None:
    for name in ("GEO_DEFAULT_RADIUS_M", "GEO_HIGH_PRECISION_THRESHOLD", "GEO_WALKING_SPEED_KMH"):
        monkeypatch.delenv(name, raising=False)

    cfg = load_geo_config()
    assert cfg.default_radius_m == 100.0
    assert cfg.high_precision_threshold == 0.00001
    assert cfg.walking_speed_kmh == 5.0


def test_hotspot_config_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("HOTSPOT_RADIUS_M", "1000")
    monkeypatch.setenv("HOTSPOT_MIN_POINTS", "5")
    monkeypatch.delenv("HOTSPOT_TIME_WINDOW_HOURS", raising=False)

    cfg = load_hotspot_config()
    assert cfg.radius_m == 1000.0
    assert cfg.min_points == 5
    assert cfg.time_window_hours == 72.0
    assert cfg.evolution_intervals == 7
