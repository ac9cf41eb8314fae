"""
Test health and metrics endpoints.
"""


def test_health_check(test_client):
    """Health check reports service identity."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    assert data["ok"] is True
    assert "version" in data
    assert data["service"] == "chromalens"


def test_metrics_summary(test_client):
    """Requests show up in the metrics summary."""
    test_client.get("/v1/colors/3B82F6")
    test_client.get("/v1/colors/nothex")

    response = test_client.get("/metrics")

    assert response.status_code == 200
    data = response.json()
    assert data["counters"]["requests_total_inspect_color"] == 1
    assert data["counters"]["invalid_input_total_inspect_color"] == 1
    assert data["timing_stats"]["inspect_color_duration_ms"]["count"] == 1
    assert data["uptime_seconds"] >= 0
