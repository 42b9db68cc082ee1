"""
Unit tests for the metrics middleware.
"""

from core.middleware.metrics import normalize_endpoint


class TestNormalizeEndpoint:
    """Tests for normalize_endpoint."""

    def test_numeric_segments_collapsed(self):
        assert (
            normalize_endpoint("/api/v1/activation-keys/42/server-groups/remove")
            == "/api/v1/activation-keys/{id}/server-groups/remove"
        )

    def test_query_string_dropped(self):
        assert normalize_endpoint("/activation-keys/groups/?tid=4") == "/activation-keys/groups/"

    def test_trailing_numeric_segment_collapsed(self):
        assert normalize_endpoint("/api/v1/activation-keys/42") == "/api/v1/activation-keys/{id}"

    def test_mixed_segments_kept(self):
        assert normalize_endpoint("/static/123abc/app.js") == "/static/123abc/app.js"
        assert normalize_endpoint("/files/v2/7z") == "/files/v2/7z"
