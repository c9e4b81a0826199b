"""Shared pytest fixtures: async test client, fake DB session, fake Redis, datasets."""

from __future__ import annotations

import random
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.database import get_db
from app.engine.types import CropRecord, SoilProfile
from app.main import app


class FakeAsyncSession:
	def __init__(self) -> None:
		self.commit = AsyncMock()
		self.rollback = AsyncMock()
		self.close = AsyncMock()
		self.execute = AsyncMock()
		self.flush = AsyncMock()
		self.refresh = AsyncMock()
		self.added: list[Any] = []

	def add(self, obj: Any) -> None:
		self.added.append(obj)

	def add_all(self, objs: list[Any]) -> None:
		self.added.extend(objs)


class FakeRedis:
	def __init__(self) -> None:
		self.store: dict[str, str] = {}
		self.get = AsyncMock(side_effect=self._get)
		self.setex = AsyncMock(side_effect=self._setex)
		self.delete = AsyncMock(side_effect=self._delete)
		self.ping = AsyncMock(return_value=True)

	async def _get(self, key: str) -> str | None:
		return self.store.get(key)

	async def _setex(self, key: str, _ttl: int, value: str) -> bool:
		self.store[key] = value
		return True

	async def _delete(self, *keys: str) -> int:
		removed = 0
		for key in keys:
			if self.store.pop(key, None) is not None:
				removed += 1
		return removed

	async def scan_iter(self, match: str | None = None) -> AsyncIterator[str]:
		prefix = (match or "*").rstrip("*")
		for key in list(self.store):
			if key.startswith(prefix):
				yield key


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
	"""A lightweight async-session stub for dependency overrides in API tests."""
	return FakeAsyncSession()


@pytest.fixture
def fake_redis() -> FakeRedis:
	"""In-memory stand-in for the redis.asyncio client."""
	return FakeRedis()


@pytest.fixture
def rng() -> random.Random:
	return random.Random(1234)


@pytest.fixture
def reference_dataset() -> list[CropRecord]:
	return [
		CropRecord("rice", 23.7, 82.3, 6.4, 236.2, 79.9, 47.6, 39.9),
		CropRecord("wheat", 20.0, 55.0, 6.8, 75.0, 60.0, 35.0, 45.0),
		CropRecord("maize", 22.4, 65.1, 6.2, 84.8, 77.8, 48.4, 19.8),
		CropRecord("cotton", 24.0, 79.8, 6.9, 80.4, 117.8, 46.2, 19.6),
		CropRecord("chickpea", 18.9, 16.9, 7.3, 80.1, 40.1, 67.8, 79.9),
	]


@pytest.fixture
def default_profile() -> SoilProfile:
	return SoilProfile(
		temperature=25,
		humidity=65,
		ph=6.5,
		rainfall=120,
		nitrogen=40,
		phosphorus=25,
		potassium=30,
	)


@pytest.fixture
async def client(fake_db_session: FakeAsyncSession) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and DB dependency mocked."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	app.dependency_overrides[get_db] = override_get_db
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan
	app.state.redis = None

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
