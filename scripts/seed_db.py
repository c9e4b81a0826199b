"""Seed the crop reference dataset and a sample market price feed.

Usage::

    python -m scripts.seed_db            # insert only into empty tables
    python -m scripts.seed_db --reset    # wipe both tables first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import math
from datetime import date, timedelta
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session_factory, engine
from app.engine.types import CropRecord, MarketPriceRecord
from app.models.crops import CropDatasetRow
from app.models.market import MarketPrice

logger = logging.getLogger("cropwise.seed")

# label, temperature, humidity, ph, rainfall, nitrogen, phosphorus, potassium
REFERENCE_PROFILES: tuple[tuple[Any, ...], ...] = (
	("rice", 23.7, 82.3, 6.4, 236.2, 79.9, 47.6, 39.9),
	("wheat", 20.0, 55.0, 6.8, 75.0, 60.0, 35.0, 45.0),
	("maize", 22.4, 65.1, 6.2, 84.8, 77.8, 48.4, 19.8),
	("cotton", 24.0, 79.8, 6.9, 80.4, 117.8, 46.2, 19.6),
	("chickpea", 18.9, 16.9, 7.3, 80.1, 40.1, 67.8, 79.9),
	("kidneybeans", 20.1, 21.6, 5.7, 105.9, 20.8, 67.5, 20.1),
	("pigeonpeas", 27.7, 48.1, 5.8, 149.5, 20.7, 67.7, 20.3),
	("mothbeans", 28.2, 53.2, 6.8, 51.2, 21.4, 48.0, 20.2),
	("mungbean", 28.5, 85.5, 6.7, 48.4, 21.0, 47.3, 19.9),
	("blackgram", 30.0, 65.1, 7.1, 67.9, 40.0, 67.5, 19.2),
	("lentil", 24.5, 64.8, 6.9, 45.7, 18.8, 68.4, 19.4),
	("pomegranate", 21.8, 90.1, 6.4, 107.5, 18.9, 18.8, 40.2),
	("banana", 27.4, 80.4, 6.0, 104.6, 100.2, 82.0, 50.0),
	("mango", 31.2, 50.2, 5.8, 94.7, 20.1, 27.2, 29.9),
	("grapes", 23.8, 81.9, 6.0, 69.6, 23.2, 132.5, 200.1),
	("watermelon", 25.6, 85.2, 6.5, 50.8, 99.4, 17.0, 50.2),
	("muskmelon", 28.7, 92.3, 6.4, 24.7, 100.3, 17.7, 50.1),
	("apple", 22.6, 92.3, 5.9, 112.7, 20.8, 134.2, 199.9),
	("orange", 22.8, 92.2, 7.0, 110.5, 19.6, 16.6, 10.0),
	("papaya", 33.7, 92.4, 6.7, 142.6, 49.9, 59.1, 50.0),
	("coconut", 27.4, 94.8, 6.0, 175.7, 22.0, 16.9, 30.6),
	("jute", 25.0, 79.6, 6.7, 174.8, 78.4, 46.9, 40.0),
	("coffee", 25.5, 58.9, 6.8, 158.1, 101.2, 28.7, 29.9),
)

# crop -> (base price per kg, markets)
MARKET_BASELINES: dict[str, tuple[float, tuple[str, ...]]] = {
	"rice": (32.0, ("Nashik", "Pune", "Nagpur")),
	"wheat": (26.5, ("Indore", "Pune")),
	"maize": (21.0, ("Davangere", "Nashik")),
	"cotton": (62.0, ("Akola", "Rajkot", "Guntur")),
	"onion": (18.0, ("Lasalgaon", "Pune")),
}


def _is_missing(value: Any) -> bool:
	return value is None or (isinstance(value, float) and math.isnan(value))


def reference_records(profiles: tuple[tuple[Any, ...], ...] = REFERENCE_PROFILES) -> list[CropRecord]:
	"""Convert raw profile tuples, skipping rows with any missing value."""
	records: list[CropRecord] = []
	for label, *values in profiles:
		if _is_missing(label) or any(_is_missing(v) for v in values):
			logger.warning("skipping incomplete reference profile", extra={"crop_label": label})
			continue
		temperature, humidity, ph, rainfall, nitrogen, phosphorus, potassium = values
		records.append(
			CropRecord(
				crop_label=str(label),
				temperature=float(temperature),
				humidity=float(humidity),
				ph=float(ph),
				rainfall=float(rainfall),
				nitrogen=float(nitrogen),
				phosphorus=float(phosphorus),
				potassium=float(potassium),
			)
		)
	return records


def sample_market_prices(today: date, days: int = 6) -> list[MarketPriceRecord]:
	"""Deterministic price series: a gentle weekly swing per crop and market."""
	records: list[MarketPriceRecord] = []
	for crop_idx, (crop, (base, markets)) in enumerate(MARKET_BASELINES.items()):
		for offset in range(days):
			for market_idx, market in enumerate(markets):
				swing = math.sin((offset + crop_idx + market_idx) * 0.9) * 0.06
				records.append(
					MarketPriceRecord(
						crop_name=crop,
						price_per_kg=round(base * (1 + swing), 2),
						market_location=market,
						price_date=today - timedelta(days=offset),
					)
				)
	return records


async def _table_count(session: AsyncSession, model: type) -> int:
	result = await session.execute(select(func.count()).select_from(model))
	return int(result.scalar_one())


async def seed(session: AsyncSession, reset: bool = False, today: date | None = None) -> dict[str, int]:
	if reset:
		await session.execute(delete(CropDatasetRow))
		await session.execute(delete(MarketPrice))

	inserted = {"crop_dataset": 0, "market_prices": 0}

	if await _table_count(session, CropDatasetRow) == 0:
		rows = [
			CropDatasetRow(
				crop_label=record.crop_label,
				temperature=record.temperature,
				humidity=record.humidity,
				ph=record.ph,
				rainfall=record.rainfall,
				nitrogen=record.nitrogen,
				phosphorus=record.phosphorus,
				potassium=record.potassium,
			)
			for record in reference_records()
		]
		session.add_all(rows)
		inserted["crop_dataset"] = len(rows)

	if await _table_count(session, MarketPrice) == 0:
		prices = [
			MarketPrice(
				crop_name=record.crop_name,
				price_per_kg=record.price_per_kg,
				market_location=record.market_location,
				price_date=record.price_date,
			)
			for record in sample_market_prices(today or date.today())
		]
		session.add_all(prices)
		inserted["market_prices"] = len(prices)

	await session.flush()
	return inserted


async def _main(reset: bool) -> None:
	async with async_session_factory() as session:
		inserted = await seed(session, reset=reset)
		await session.commit()
	await engine.dispose()
	logger.info("seed complete", extra=inserted)


if __name__ == "__main__":
	parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
	parser.add_argument("--reset", action="store_true", help="delete existing rows first")
	args = parser.parse_args()
	logging.basicConfig(level=logging.INFO)
	asyncio.run(_main(args.reset))
