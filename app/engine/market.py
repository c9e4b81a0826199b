"""Crop profitability ranking over recent market price observations."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from app.engine.numeric import round_half_up, safe_ratio
from app.engine.types import CropProfitability, MarketPriceRecord
from app.models.enums import PriceTrendEnum

TREND_WINDOW = 3
TREND_UP_FACTOR = 1.05
TREND_DOWN_FACTOR = 0.95


def price_trend(prices_newest_first: Sequence[float]) -> PriceTrendEnum:
	"""Compare the latest price to the mean of up to three preceding prices."""
	if not prices_newest_first:
		return PriceTrendEnum.stable
	latest = prices_newest_first[0]
	prior = prices_newest_first[1 : 1 + TREND_WINDOW]
	# no prior prices averages to 0, so any positive latest price trends up
	prior_avg = safe_ratio(sum(prior), len(prior))
	if latest > prior_avg * TREND_UP_FACTOR:
		return PriceTrendEnum.up
	if latest < prior_avg * TREND_DOWN_FACTOR:
		return PriceTrendEnum.down
	return PriceTrendEnum.stable


def profitability_score(avg_price: float, latest_price: float) -> int:
	price_score = min(100.0, (avg_price / 10) * 20)
	deviation = safe_ratio(abs(latest_price - avg_price), avg_price)
	stability_score = max(0.0, 100 - deviation * 100)
	return round_half_up((price_score + stability_score) / 2)


def _summarize(crop_name: str, records: list[MarketPriceRecord]) -> CropProfitability:
	ordered = sorted(records, key=lambda r: r.price_date, reverse=True)
	prices = [r.price_per_kg for r in ordered]
	avg_price = sum(prices) / len(prices)
	return CropProfitability(
		crop_name=crop_name,
		avg_price=round_half_up(avg_price * 100) / 100,
		trend=price_trend(prices),
		profitability_score=profitability_score(avg_price, prices[0]),
		market_count=len({r.market_location for r in ordered}),
	)


def rank_profitability(records: Iterable[MarketPriceRecord]) -> list[CropProfitability]:
	"""Group prices by crop and rank crops by profitability score, best first."""
	groups: dict[str, list[MarketPriceRecord]] = defaultdict(list)
	for record in records:
		groups[record.crop_name].append(record)

	summaries = [_summarize(name, items) for name, items in groups.items()]
	return sorted(summaries, key=lambda item: item.profitability_score, reverse=True)
