"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from zerobudget.api.health import check_database


class TestHealthCheckEndpoint:
    @pytest.mark.asyncio
    async def test_health_ok(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["catalog_version"] == "1"
        assert data["checks"]["database"]["status"] == "ok"
        assert data["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_database_down_reports_degraded(self):
        db = AsyncMock()
        db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

        result = await check_database(db)

        assert result["status"] == "down"
        assert result["error"] == "OperationalError"
