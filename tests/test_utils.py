"""
Unit tests for request ids, metrics collection and configuration helpers.
"""
import re

import pytest

from app.config import Config
from app.utils.ids import generate_request_id
from app.utils.metrics import MetricsCollector


class TestRequestIds:
    """Test request id generation."""

    def test_format(self):
        assert re.fullmatch(r"clr-\d{14}-[0-9a-f]{8}", generate_request_id())

    def test_prefix(self):
        assert generate_request_id("pal").startswith("pal-")

    def test_unique(self):
        assert generate_request_id() != generate_request_id()


class TestMetricsCollector:
    """Test counters and timing statistics."""

    def test_counters(self):
        metrics = MetricsCollector()
        metrics.increment_request_count("palette")
        metrics.increment_request_count("palette")
        metrics.increment_request_count("blend")
        metrics.increment_invalid_input_count("blend")

        counters = metrics.get_counters()
        assert counters["requests_total"] == 3
        assert counters["requests_total_palette"] == 2
        assert counters["invalid_input_total_blend"] == 1

    def test_timing_stats(self):
        metrics = MetricsCollector()
        for duration in [10.0, 20.0, 30.0, 40.0, 50.0]:
            metrics.record_timing("palette", duration)

        stats = metrics.get_timing_stats()["palette_duration_ms"]
        assert stats["count"] == 5
        assert stats["mean"] == pytest.approx(30.0)
        assert stats["min"] == 10.0
        assert stats["max"] == 50.0
        assert stats["p50"] == pytest.approx(30.0)
        assert stats["p95"] == pytest.approx(48.0)

    def test_reset(self):
        metrics = MetricsCollector()
        metrics.increment_failure_count("ValueError")
        metrics.reset()
        assert metrics.get_counters() == {}
        assert metrics.get_timing_stats() == {}


class TestConfig:
    """Test configuration helpers."""

    def test_allowed_origins_split(self, monkeypatch):
        monkeypatch.setattr(Config, "ALLOWED_ORIGINS", "http://a.test, http://b.test,,")
        assert Config.allowed_origins() == ["http://a.test", "http://b.test"]

    def test_export_formats(self):
        assert Config.validate_export_format("scss")
        assert not Config.validate_export_format("pdf")

    @pytest.mark.parametrize("target,valid", [(1.0, True), (4.5, True), (21.0, True), (0.5, False), (22.0, False)])
    def test_target_contrast(self, target, valid):
        assert Config.validate_target_contrast(target) is valid
