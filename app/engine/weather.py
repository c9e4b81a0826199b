"""Simulated 7-day weather outlook and the farming alerts derived from it.

The forecast is synthetic: there is no weather provider behind it. Callers
pass a ``random.Random`` so the outlook is reproducible under a fixed seed.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from datetime import date, timedelta

from app.engine.numeric import round_half_up
from app.engine.types import FarmingAlert, WeatherDay
from app.models.enums import AlertTypeEnum, WeatherConditionEnum

HEAVY_RAIN_MM = 10
HOT_DAY_C = 35
DRY_DAY_MM = 1
DRY_SPELL_DAYS = 5
OPTIMAL_STRETCH_DAYS = 3

_CONDITIONS = (
	WeatherConditionEnum.sunny,
	WeatherConditionEnum.cloudy,
	WeatherConditionEnum.rainy,
	WeatherConditionEnum.stormy,
)


def _rainfall(condition: WeatherConditionEnum, rng: random.Random) -> float:
	if condition == WeatherConditionEnum.rainy:
		return rng.random() * 20 + 5
	if condition == WeatherConditionEnum.stormy:
		return rng.random() * 50 + 10
	return rng.random() * 2


def simulate_forecast(start: date, rng: random.Random, days: int = 7) -> list[WeatherDay]:
	forecast: list[WeatherDay] = []
	for offset in range(days):
		base_temp = 25 + math.sin(offset * 0.5) * 5
		condition = rng.choice(_CONDITIONS)
		rainfall = _rainfall(condition, rng)
		forecast.append(
			WeatherDay(
				date=start + timedelta(days=offset),
				temperature_min=round_half_up(base_temp - rng.random() * 5),
				temperature_max=round_half_up(base_temp + rng.random() * 8),
				humidity=round_half_up(50 + rng.random() * 40),
				rainfall=round_half_up(rainfall * 10) / 10,
				wind_speed=round_half_up(rng.random() * 20 + 5),
				condition=condition,
				uv_index=round_half_up(rng.random() * 10 + 1),
			)
		)
	return forecast


def _is_optimal(day: WeatherDay) -> bool:
	return (
		day.temperature_max <= 30
		and day.temperature_min >= 15
		and day.rainfall < 5
		and day.condition == WeatherConditionEnum.sunny
	)


def farming_alerts(forecast: Sequence[WeatherDay]) -> list[FarmingAlert]:
	alerts: list[FarmingAlert] = []

	heavy_rain = [day for day in forecast if day.rainfall > HEAVY_RAIN_MM]
	if heavy_rain:
		alerts.append(
			FarmingAlert(
				type=AlertTypeEnum.warning,
				message=f"Heavy rainfall expected on {len(heavy_rain)} day(s)",
				recommendation="Ensure proper drainage and consider delaying planting activities",
			)
		)

	if any(day.temperature_max > HOT_DAY_C for day in forecast):
		alerts.append(
			FarmingAlert(
				type=AlertTypeEnum.warning,
				message=f"High temperatures (>{HOT_DAY_C}°C) expected",
				recommendation="Increase irrigation frequency and provide shade for sensitive crops",
			)
		)

	good_days = [day for day in forecast if _is_optimal(day)]
	if len(good_days) >= OPTIMAL_STRETCH_DAYS:
		alerts.append(
			FarmingAlert(
				type=AlertTypeEnum.success,
				message=f"{len(good_days)} days of optimal farming conditions ahead",
				recommendation="Ideal time for planting, harvesting, and field maintenance activities",
			)
		)

	dry_days = [day for day in forecast if day.rainfall < DRY_DAY_MM]
	if len(dry_days) >= DRY_SPELL_DAYS:
		alerts.append(
			FarmingAlert(
				type=AlertTypeEnum.info,
				message="Extended dry period expected",
				recommendation="Plan irrigation schedule and consider drought-resistant crop varieties",
			)
		)

	return alerts
