"""Integration tests for API routes backed by the database."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from holonet.db.models.query import QueryModel

pytestmark = [pytest.mark.integration, pytest.mark.requires_db]


# ============================================================================
# Health Check Tests
# ============================================================================


class TestHealthEndpoint:
    """Tests for the /api/v1/health endpoint."""

    async def test_health_reports_database(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"] == "up"


# ============================================================================
# Statistics Tests
# ============================================================================


class TestStatisticsEndpoints:
    """Tests for /api/v1/stats."""

    async def test_not_yet_available(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/stats")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Statistics not yet available",
            "calculatedAt": None,
        }

    async def test_compute_then_read(
        self,
        test_client: AsyncClient,
        sample_queries: list[QueryModel],
    ):
        computed = await test_client.post("/api/v1/stats/compute")

        assert computed.status_code == 200
        data = computed.json()["data"]
        assert data["totalQueries"] == 6
        assert data["totalCachedQueries"] == 2
        assert data["averageDurationMs"] == 35.0
        assert data["topFiveQueries"] == [
            {"query": "luke", "count": 3},
            {"query": "leia", "count": 2},
            {"query": "han", "count": 1},
        ]
        assert data["mostPopularHour"] == 9

        latest = await test_client.get("/api/v1/stats")

        assert latest.status_code == 200
        assert latest.json()["data"] == data


# ============================================================================
# Error Handling Tests
# ============================================================================


class TestErrorHandling:
    """Tests for error handling."""

    async def test_404_for_unknown_endpoint(self, test_client: AsyncClient):
        """Unknown endpoints should return 404."""
        response = await test_client.get("/api/v1/unknown")
        assert response.status_code == 404

    async def test_405_for_wrong_method(self, test_client: AsyncClient):
        """Wrong HTTP method should return 405."""
        response = await test_client.delete("/api/v1/health")
        assert response.status_code == 405
