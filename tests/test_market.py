from __future__ import annotations

import json
from datetime import UTC, date, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from app.engine.market import price_trend, profitability_score, rank_profitability
from app.engine.types import MarketPriceRecord
from app.models.enums import PriceTrendEnum
from app.schemas.market import MarketPriceCreate
from app.services.market_service import MARKET_FEED_UNAVAILABLE_NOTICE, MarketService

TODAY = date(2026, 10, 18)


def _record(crop: str, price: float, days_ago: int = 0, market: str = "Pune") -> MarketPriceRecord:
    return MarketPriceRecord(
        crop_name=crop,
        price_per_kg=price,
        market_location=market,
        price_date=TODAY - timedelta(days=days_ago),
    )


def _row(crop: str, price: float, days_ago: int = 0, market: str = "Pune") -> SimpleNamespace:
    return SimpleNamespace(
        id=uuid4(),
        crop_name=crop,
        price_per_kg=price,
        market_location=market,
        price_date=TODAY - timedelta(days=days_ago),
        created_at=datetime.now(UTC),
    )


def test_price_trend_directions() -> None:
    assert price_trend([110, 100, 100, 100]) == PriceTrendEnum.up
    assert price_trend([90, 100, 100, 100]) == PriceTrendEnum.down
    assert price_trend([104, 100, 100]) == PriceTrendEnum.stable
    # only the three prices before the latest count
    assert price_trend([110, 100, 100, 100, 10]) == PriceTrendEnum.up


def test_single_observation_trends_up() -> None:
    # no prior prices means a prior average of 0
    assert price_trend([42.0]) == PriceTrendEnum.up
    assert price_trend([0.0]) == PriceTrendEnum.stable
    assert price_trend([]) == PriceTrendEnum.stable


def test_single_record_group_ranks_as_up() -> None:
    (onion,) = rank_profitability([_record("onion", 20.0)])
    assert onion.trend == PriceTrendEnum.up
    assert onion.avg_price == 20.0


def test_avg_price_rounds_half_cent_up() -> None:
    records = [_record("okra", 0.25, 0), _record("okra", 0.0, 1)]
    (okra,) = rank_profitability(records)
    assert okra.avg_price == 0.13


def test_profitability_score_components() -> None:
    assert profitability_score(10, 10) == 60
    assert profitability_score(60, 60) == 100
    assert profitability_score(60, 30) == 75
    assert profitability_score(0, 0) == 50


def test_rank_profitability_orders_by_score() -> None:
    records = [
        _record("onion", 5.0, 0),
        _record("onion", 5.0, 1),
        _record("cotton", 62.0, 0, "Akola"),
        _record("cotton", 62.0, 1, "Rajkot"),
        _record("cotton", 62.0, 2, "Akola"),
    ]
    ranking = rank_profitability(records)

    assert [item.crop_name for item in ranking] == ["cotton", "onion"]
    cotton, onion = ranking
    assert cotton.profitability_score == 100
    assert cotton.market_count == 2
    assert cotton.avg_price == 62.0
    assert cotton.trend == PriceTrendEnum.stable
    assert onion.profitability_score == 55
    assert onion.market_count == 1


def test_rank_profitability_uses_newest_price_for_trend() -> None:
    # input order is oldest first; the ranking sorts by date itself
    records = [
        _record("rice", 30.0, 3),
        _record("rice", 30.0, 2),
        _record("rice", 30.0, 1),
        _record("rice", 36.0, 0),
    ]
    (rice,) = rank_profitability(records)
    assert rice.trend == PriceTrendEnum.up
    assert rice.avg_price == 31.5


def test_rank_profitability_keeps_first_seen_order_on_ties() -> None:
    records = [_record("wheat", 20.0), _record("maize", 20.0)]
    assert [item.crop_name for item in rank_profitability(records)] == ["wheat", "maize"]
    assert rank_profitability([]) == []


@pytest.mark.asyncio
async def test_profitability_is_cached(
    fake_db_session: object, fake_redis: object, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = {"count": 0}

    async def _list_recent(self: MarketService, limit: int | None = None) -> list[SimpleNamespace]:
        calls["count"] += 1
        return [_row("cotton", 62.0, 0, "Akola"), _row("onion", 5.0, 0)]

    monkeypatch.setattr(MarketService, "list_recent", _list_recent)
    service = MarketService(fake_db_session, fake_redis)

    first = await service.get_profitability()
    assert first.cached is False
    assert first.sample_size == 2
    assert [item.crop_name for item in first.items] == ["cotton", "onion"]
    assert "market:profitability:50" in fake_redis.store
    fake_redis.setex.assert_awaited_once()

    second = await service.get_profitability()
    assert second.cached is True
    assert second.sample_size == 2
    assert [item.crop_name for item in second.items] == ["cotton", "onion"]
    assert calls["count"] == 1


@pytest.mark.asyncio
async def test_profitability_degrades_when_feed_unavailable(
    fake_db_session: object, fake_redis: object, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _broken(self: MarketService, limit: int | None = None) -> list[SimpleNamespace]:
        raise SQLAlchemyError("relation market_prices does not exist")

    monkeypatch.setattr(MarketService, "list_recent", _broken)
    service = MarketService(fake_db_session, fake_redis)

    result = await service.get_profitability(10)

    assert result.items == []
    assert result.sample_size == 0
    assert result.notices == [MARKET_FEED_UNAVAILABLE_NOTICE]
    fake_redis.setex.assert_not_awaited()


@pytest.mark.asyncio
async def test_add_price_normalizes_and_invalidates(fake_db_session: object, fake_redis: object) -> None:
    fake_redis.store["market:profitability:50"] = json.dumps({"sample_size": 0, "items": []})
    fake_redis.store["unrelated"] = "keep"
    service = MarketService(fake_db_session, fake_redis)

    price = await service.add_price(
        MarketPriceCreate(
            crop_name="  Wheat ",
            price_per_kg=27.5,
            market_location=" Indore ",
            price_date=TODAY,
        )
    )

    assert price.crop_name == "wheat"
    assert price.market_location == "Indore"
    assert fake_db_session.added == [price]
    fake_db_session.flush.assert_awaited_once()
    fake_db_session.refresh.assert_awaited_once_with(price)
    assert "market:profitability:50" not in fake_redis.store
    assert fake_redis.store["unrelated"] == "keep"


@pytest.mark.asyncio
async def test_list_prices_endpoint(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _list_recent(self: MarketService, limit: int | None = None) -> list[SimpleNamespace]:
        assert limit == 5
        return [_row("rice", 32.0, 0, "Nashik")]

    monkeypatch.setattr(MarketService, "list_recent", _list_recent)

    response = await client.get("/api/v1/market/prices", params={"limit": 5})

    assert response.status_code == 200
    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["crop_name"] == "rice"
    assert items[0]["price_date"] == TODAY.isoformat()


@pytest.mark.asyncio
async def test_list_prices_rejects_bad_limit(client: AsyncClient) -> None:
    response = await client.get("/api/v1/market/prices", params={"limit": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_add_price_endpoint(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _add(self: MarketService, payload: MarketPriceCreate) -> SimpleNamespace:
        return _row(payload.crop_name.lower(), payload.price_per_kg, 0, payload.market_location)

    monkeypatch.setattr(MarketService, "add_price", _add)

    response = await client.post(
        "/api/v1/market/prices",
        json={
            "crop_name": "Maize",
            "price_per_kg": 21.5,
            "market_location": "Davangere",
            "price_date": TODAY.isoformat(),
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["crop_name"] == "maize"
    assert body["price_per_kg"] == 21.5
    assert "id" in body


@pytest.mark.asyncio
async def test_add_price_requires_date(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/market/prices",
        json={"crop_name": "maize", "price_per_kg": 21.5, "market_location": "Davangere"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_profitability_endpoint(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _list_recent(self: MarketService, limit: int | None = None) -> list[SimpleNamespace]:
        return [
            _row("rice", 30.0, 1, "Nashik"),
            _row("rice", 36.0, 0, "Pune"),
            _row("onion", 5.0, 0, "Lasalgaon"),
        ]

    monkeypatch.setattr(MarketService, "list_recent", _list_recent)

    response = await client.get("/api/v1/market/profitability")

    assert response.status_code == 200
    body = response.json()
    assert body["cached"] is False
    assert body["sample_size"] == 3
    assert body["notices"] == []
    rice = body["items"][0]
    assert rice["crop_name"] == "rice"
    assert rice["avg_price"] == 33.0
    assert rice["trend"] == "up"
    assert rice["market_count"] == 2


@pytest.mark.asyncio
async def test_list_prices_defaults_to_configured_limit(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen: dict[str, int | None] = {}

    async def _list_recent(self: MarketService, limit: int | None = None) -> list[SimpleNamespace]:
        seen["limit"] = limit
        return []

    monkeypatch.setattr(MarketService, "list_recent", _list_recent)

    response = await client.get("/api/v1/market/prices")

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert seen["limit"] is None


@pytest.mark.asyncio
async def test_list_recent_falls_back_to_feed_limit(fake_db_session: object) -> None:
    fake_db_session.execute = AsyncMock(return_value=MagicMock())
    service = MarketService(fake_db_session)

    await service.list_recent()

    stmt = fake_db_session.execute.await_args.args[0]
    assert stmt._limit == service.settings.market_feed_limit
