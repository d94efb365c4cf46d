"""
Brewery Backend — Health Check and Error Envelope Tests
=========================================================

What:  /health status reporting and the 500 responses produced by the
       global exception handlers.
How:   Failures are injected with `app.dependency_overrides`.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from brewery import __version__
from brewery.dependencies import get_beer_service, get_engine
from brewery.exceptions import DatabaseError


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_health_database_unreachable(self, app, test_client):
        broken_engine = MagicMock()
        broken_engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        app.dependency_overrides[get_engine] = lambda: broken_engine

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestServerErrors:

    @pytest.mark.asyncio
    async def test_database_error_is_generic_500(self, app, test_client):
        failing_service = MagicMock()
        failing_service.get_beer_by_id = AsyncMock(
            side_effect=DatabaseError(context={"error_type": "OperationalError"})
        )
        app.dependency_overrides[get_beer_service] = lambda: failing_service

        response = await test_client.get("/api/v2/beer/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "OperationalError" not in body["message"]
        assert body["request_id"]

    @pytest.mark.asyncio
    async def test_streaming_failure_before_first_row_is_500(self, app, test_client):
        async def failing_rows():
            raise DatabaseError()
            yield  # pragma: no cover

        failing_service = MagicMock()
        failing_service.count_beers = AsyncMock(return_value=0)
        failing_service.list_beers = failing_rows
        app.dependency_overrides[get_beer_service] = lambda: failing_service

        response = await test_client.get("/api/v2/beer")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"
