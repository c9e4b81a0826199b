from __future__ import annotations

import pytest
from httpx import AsyncClient

from app import main


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "cropwise", "version": "0.1.0"}


@pytest.mark.asyncio
async def test_health_ready_ok(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _ok(_app):
        return {
            "database": {"ok": True, "message": "ok"},
            "redis": {"ok": True, "message": "ok"},
        }

    monkeypatch.setattr(main, "_run_readiness_checks", _ok)

    response = await client.get("/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["checks"]["database"]["ok"] is True


@pytest.mark.asyncio
async def test_health_ready_degraded(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _bad(_app):
        return {
            "database": {"ok": True, "message": "ok"},
            "redis": {"ok": False, "message": "redis not connected"},
        }

    monkeypatch.setattr(main, "_run_readiness_checks", _bad)

    response = await client.get("/health/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "degraded"
    assert body["checks"]["redis"]["ok"] is False


@pytest.mark.asyncio
async def test_redis_check_without_client() -> None:
    main.app.state.redis = None
    result = await main._check_redis(main.app)
    assert result == {"ok": False, "message": "redis not connected"}


@pytest.mark.asyncio
async def test_redis_check_pings_client(fake_redis: object) -> None:
    main.app.state.redis = fake_redis
    try:
        result = await main._check_redis(main.app)
    finally:
        main.app.state.redis = None
    assert result == {"ok": True, "message": "ok"}
    fake_redis.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: AsyncClient) -> None:
    request_id = "advisory-request-id"
    response = await client.get("/health", headers={"x-request-id": request_id})
    assert response.status_code == 200
    assert response.headers.get("x-request-id") == request_id


@pytest.mark.asyncio
async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/api/v1/advisory/profit/defaults/wheat")
    assert response.status_code == 200
    generated = response.headers.get("x-request-id")
    assert generated is not None
    assert len(generated) >= 8


@pytest.mark.asyncio
async def test_openapi_lists_advisory_routes(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    for path in (
        "/api/v1/advisory/predict",
        "/api/v1/advisory/fertilizer",
        "/api/v1/advisory/profit",
        "/api/v1/advisory/profit/defaults/{crop_type}",
        "/api/v1/crops/dataset",
        "/api/v1/market/prices",
        "/api/v1/market/profitability",
        "/api/v1/weather/forecast",
    ):
        assert path in paths
