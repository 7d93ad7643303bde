"""
Tests for request logging, database failures and the health endpoint.
"""

import logging

import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from parcelly.app.db.mongo import get_db
from parcelly.app.main import app


class BrokenCursor:
    async def to_list(self, length=None):
        raise ServerSelectionTimeoutError("cluster0: connection refused")


class BrokenCollection:
    def find(self, *args, **kwargs):
        return BrokenCursor()

    async def find_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("cluster0: connection refused")


class BrokenDatabase:
    """Database whose every call fails the way an unreachable cluster does."""

    def __getitem__(self, name):
        return BrokenCollection()

    async def command(self, *args, **kwargs):
        raise PyMongoError("ping failed")


class PingableDatabase:
    async def command(self, name):
        return {"ok": 1.0}


@pytest.fixture
def broken_db():
    async def override_get_db():
        return BrokenDatabase()

    app.dependency_overrides[get_db] = override_get_db


# TEST 1: Request access line
@pytest.mark.asyncio
async def test_request_log_line_has_timing_ip_and_correlation_id(client, caplog):
    caplog.set_level(logging.INFO, logger="parcelly.request")

    response = await client.get("/parcel", headers={"X-Correlation-ID": "cid-123"})

    assert response.headers["X-Correlation-ID"] == "cid-123"
    float(response.headers["X-Process-Time"])

    records = [r for r in caplog.records if r.name == "parcelly.request"]
    assert len(records) == 1
    message = records[0].getMessage()
    assert message.startswith("GET /parcel -> 200 in ")
    assert "ms from 127.0.0.1" in message
    assert message.endswith("[cid=cid-123]")
    assert records[0].levelno == logging.INFO


@pytest.mark.asyncio
async def test_client_errors_log_as_warning(client, caplog):
    caplog.set_level(logging.INFO, logger="parcelly.request")

    await client.get("/parcel/g/123", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

    record = [r for r in caplog.records if r.name == "parcelly.request"][0]
    assert record.levelno == logging.WARNING
    assert "-> 400 in " in record.getMessage()
    assert "from 203.0.113.7 " in record.getMessage()


@pytest.mark.asyncio
async def test_generated_correlation_ids_differ(client):
    first = await client.get("/")
    second = await client.get("/")

    assert first.headers["X-Correlation-ID"] != second.headers["X-Correlation-ID"]


# TEST 2: Database failures
@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["/parcel", "/users", "/reviews", "/users/someone@test.com"])
async def test_database_failure_returns_500_with_driver_message(client, broken_db, url):
    response = await client.get(url)

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "ERR_DATABASE"
    assert "connection refused" in body["details"]["error"]


@pytest.mark.asyncio
async def test_database_failure_on_write_path(client, auth_headers, broken_db):
    response = await client.patch("/parcel/507f1f77bcf86cd799439011", json={"price": 1}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["error_code"] == "ERR_DATABASE"


# TEST 3: Health
@pytest.mark.asyncio
async def test_health_reports_unreachable_database(client, broken_db):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "unreachable"


@pytest.mark.asyncio
async def test_health_reports_reachable_database(client):
    async def override_get_db():
        return PingableDatabase()

    app.dependency_overrides[get_db] = override_get_db

    response = await client.get("/health")

    assert response.json()["database"] == "ok"
