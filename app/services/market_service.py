"""Market price feed: persistence, recent reads and cached profitability ranking."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from redis.asyncio import Redis
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.engine.market import rank_profitability
from app.engine.types import MarketPriceRecord
from app.models.market import MarketPrice
from app.schemas.market import (
	CropProfitabilityRead,
	MarketPriceCreate,
	ProfitabilityResponse,
)

_logger = logging.getLogger("cropwise.market")

MARKET_FEED_UNAVAILABLE_NOTICE = "Market price feed unavailable; profitability ranking is empty."
PROFITABILITY_CACHE_PREFIX = "market:profitability"


def row_to_record(row: MarketPrice) -> MarketPriceRecord:
	return MarketPriceRecord(
		crop_name=row.crop_name,
		price_per_kg=row.price_per_kg,
		market_location=row.market_location,
		price_date=row.price_date,
	)


class MarketService:
	def __init__(self, db: AsyncSession, redis_client: Redis | None = None):
		self.db = db
		self.redis_client = redis_client
		self.settings = get_settings()

	async def list_recent(self, limit: int | None = None) -> list[MarketPrice]:
		stmt = (
			select(MarketPrice)
			.order_by(MarketPrice.price_date.desc(), MarketPrice.created_at.desc())
			.limit(limit or self.settings.market_feed_limit)
		)
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	async def add_price(self, payload: MarketPriceCreate) -> MarketPrice:
		price = MarketPrice(
			crop_name=payload.crop_name.strip().lower(),
			price_per_kg=payload.price_per_kg,
			market_location=payload.market_location.strip(),
			price_date=payload.price_date,
		)
		self.db.add(price)
		await self.db.flush()
		await self.db.refresh(price)
		await self._invalidate_rankings()
		return price

	async def get_profitability(self, limit: int | None = None) -> ProfitabilityResponse:
		limit = limit or self.settings.market_feed_limit
		cache_key = f"{PROFITABILITY_CACHE_PREFIX}:{limit}"

		if self.redis_client is not None:
			cached = await self.redis_client.get(cache_key)
			if cached is not None:
				payload = json.loads(cached)
				return ProfitabilityResponse(
					generated_at=datetime.now(UTC),
					cached=True,
					sample_size=payload["sample_size"],
					items=payload["items"],
				)

		try:
			rows = await self.list_recent(limit)
		except (SQLAlchemyError, OSError) as exc:
			_logger.warning("market_feed_unavailable", extra={"error": str(exc)})
			return ProfitabilityResponse(
				generated_at=datetime.now(UTC),
				notices=[MARKET_FEED_UNAVAILABLE_NOTICE],
			)

		ranking = rank_profitability(row_to_record(row) for row in rows)
		items = [
			CropProfitabilityRead(
				crop_name=item.crop_name,
				avg_price=item.avg_price,
				trend=item.trend,
				profitability_score=item.profitability_score,
				market_count=item.market_count,
			)
			for item in ranking
		]

		if self.redis_client is not None:
			await self.redis_client.setex(
				cache_key,
				self.settings.market_ranking_cache_seconds,
				json.dumps(
					{
						"sample_size": len(rows),
						"items": [item.model_dump(mode="json") for item in items],
					}
				),
			)

		return ProfitabilityResponse(
			generated_at=datetime.now(UTC),
			cached=False,
			sample_size=len(rows),
			items=items,
		)

	async def _invalidate_rankings(self) -> None:
		if self.redis_client is None:
			return
		keys = [key async for key in self.redis_client.scan_iter(match=f"{PROFITABILITY_CACHE_PREFIX}:*")]
		if keys:
			await self.redis_client.delete(*keys)
