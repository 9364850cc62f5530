"""End-to-end tests for the HTTP API.

The application is created with settings that point at a temporary SQLite
database and carry no Gemini key, so analyses run through the rule-based
fallback unless a test swaps the analysis service.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.dependencies import get_analysis_service, get_review_store
from app.main import create_app
from app.models.rule_based import RuleBasedProvider
from app.services.analysis import AnalysisService
from app.utils.exceptions import StorageError
from tests.fixtures.common_mocks import FakeProvider


@pytest.mark.integration
class TestRootAndHealth:
    """Tests for the informational endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "Sentiment Analysis API"
        assert data["status"] == "operational"
        assert data["health_url"] == "/api/health"

    def test_health_without_ai_key(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["provider"] == "gemini"
        assert data["ai_enabled"] is False
        assert data["timestamp"]

    def test_correlation_id_echoed(self, client):
        response = client.get("/api/health", headers={"X-Correlation-ID": "health-check-1"})

        assert response.headers["X-Correlation-ID"] == "health-check-1"

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/analyze",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


@pytest.mark.integration
class TestAnalyzeEndpoint:
    """Tests for `POST /api/analyze`."""

    def test_analyze_falls_back_to_rule_based(self, client):
        response = client.post("/api/analyze", json={"text": "This movie was not good"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert isinstance(body["reviewId"], int)

        data = body["data"]
        assert data["sentiment"] == "negative"
        assert data["confidence"] == 100
        assert data["provider"] == "rule_based"
        assert data["aiPowered"] is False
        assert data["details"] == {"positiveScore": 0, "negativeScore": 1, "wordCount": 5}
        assert data["explanation"] == "Found 1 negative words and 0 positive words"

    def test_analysis_is_stored(self, client):
        body = client.post("/api/analyze", json={"text": "A hilarious masterpiece"}).json()

        review = client.get(f"/api/reviews/{body['reviewId']}").json()["data"]

        assert review["review_text"] == "A hilarious masterpiece"
        assert review["sentiment"] == "positive"
        assert review["provider"] == "rule_based"
        assert review["ai_powered"] is False

    def test_long_text_preview(self, client):
        text = "good " * 100

        data = client.post("/api/analyze", json={"text": text}).json()["data"]

        assert data["text"].endswith("...")
        assert len(data["text"]) == 103

    @pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": "   "}, {"text": 123}])
    def test_invalid_payload_returns_422(self, client, payload):
        response = client.post("/api/analyze", json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "E1001"
        assert body["validation_errors"]
        assert body["correlation_id"]

    def test_text_over_hard_limit_returns_422(self, client):
        response = client.post("/api/analyze", json={"text": "a" * 10001})

        assert response.status_code == 422

    def test_configured_max_length_returns_400(self, tmp_path):
        settings = Settings(database_path=str(tmp_path / "short.db"), max_text_length=20)

        with TestClient(create_app(settings)) as client:
            response = client.post("/api/analyze", json={"text": "good " * 10})

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "E1002"
        assert body["success"] is False

    def test_ai_provider_result_returned(self, test_app, test_settings):
        service = AnalysisService(FakeProvider(), RuleBasedProvider(), test_settings)
        test_app.dependency_overrides[get_analysis_service] = lambda: service

        with TestClient(test_app) as client:
            body = client.post("/api/analyze", json={"text": "A wonderful film"}).json()

        assert body["data"]["provider"] == "fake_ai"
        assert body["data"]["aiPowered"] is True
        assert body["data"]["keyPhrases"] == ["wonderful"]

    def test_storage_failure_keeps_analysis(self, test_app):
        failing_store = MagicMock()
        failing_store.save_review.side_effect = StorageError("disk full")
        test_app.dependency_overrides[get_review_store] = lambda: failing_store

        with TestClient(test_app) as client:
            response = client.post("/api/analyze", json={"text": "great"})

        assert response.status_code == 200
        body = response.json()
        assert body["reviewId"] is None
        assert body["data"]["sentiment"] == "positive"

    def test_unexpected_error_returns_500(self, test_app):
        broken = MagicMock()
        broken.analyze.side_effect = RuntimeError("kaboom")
        test_app.dependency_overrides[get_analysis_service] = lambda: broken

        with TestClient(test_app, raise_server_exceptions=False) as client:
            response = client.post("/api/analyze", json={"text": "great"})

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "E4001"
        assert body["error_id"].startswith("error_")


@pytest.mark.integration
class TestReviewEndpoints:
    """Tests for listing, fetching and aggregating stored reviews."""

    def _analyze(self, client, text):
        return client.post("/api/analyze", json={"text": text}).json()["reviewId"]

    def test_recent_reviews_newest_first(self, client):
        first = self._analyze(client, "good")
        second = self._analyze(client, "bad")
        third = self._analyze(client, "okay")

        response = client.get("/api/reviews", params={"limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [review["id"] for review in body["data"]] == [third, second]
        assert first not in [review["id"] for review in body["data"]]

    def test_default_limit(self, client):
        for i in range(12):
            self._analyze(client, f"review number {i}")

        data = client.get("/api/reviews").json()["data"]

        assert len(data) == 10

    @pytest.mark.parametrize("limit", [0, 101, "many"])
    def test_invalid_limit_returns_422(self, client, limit):
        response = client.get("/api/reviews", params={"limit": limit})

        assert response.status_code == 422

    def test_missing_review_returns_404(self, client):
        response = client.get("/api/reviews/999999")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "E6002"
        assert body["success"] is False

    def test_stats(self, client):
        self._analyze(client, "good great bad")
        self._analyze(client, "terrible")
        self._analyze(client, "the plot")

        data = client.get("/api/stats").json()["data"]

        assert data == {
            "total_reviews": 3,
            "positive_count": 1,
            "negative_count": 1,
            "neutral_count": 1,
            "avg_confidence": 55.67,
        }

    def test_stats_when_empty(self, client):
        data = client.get("/api/stats").json()["data"]

        assert data["total_reviews"] == 0
        assert data["avg_confidence"] is None


@pytest.mark.integration
class TestMetricsEndpoint:
    """Tests for the Prometheus endpoint."""

    def test_metrics_exposed(self, client):
        client.post("/api/analyze", json={"text": "good"})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "sentiment_active_requests" in response.text

    def test_metrics_disabled(self, tmp_path):
        settings = Settings(database_path=str(tmp_path / "m.db"), enable_metrics=False)

        with TestClient(create_app(settings)) as client:
            response = client.get("/metrics")

        assert response.status_code == 404


@pytest.mark.integration
class TestLifespan:
    """Tests for startup and shutdown of the application services."""

    def test_services_created_and_released(self, test_app):
        with TestClient(test_app):
            assert test_app.state.review_store.is_open
            assert test_app.state.analysis_service is not None

        assert test_app.state.review_store is None
        assert test_app.state.analysis_service is None

    def test_rule_based_primary(self, tmp_path):
        settings = Settings(
            database_path=str(tmp_path / "rb.db"),
            provider={"provider": "rule_based"},
        )

        with TestClient(create_app(settings)) as client:
            health = client.get("/api/health").json()

        assert health["provider"] == "rule_based"
        assert health["ai_enabled"] is False

    def test_gemini_key_enables_ai(self, tmp_path):
        settings = Settings(database_path=str(tmp_path / "g.db"), gemini_api_key="test-key")

        with TestClient(create_app(settings)) as client:
            health = client.get("/api/health").json()

        assert health["ai_enabled"] is True
