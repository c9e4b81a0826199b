"""Simulated weather outlook for a location, with derived farming alerts."""

from __future__ import annotations

import logging
import random
from datetime import UTC, datetime

from app.config import get_settings
from app.engine.weather import farming_alerts, simulate_forecast
from app.schemas.weather import FarmingAlertRead, ForecastResponse, WeatherDayRead

_logger = logging.getLogger("cropwise.weather")


class WeatherService:
	def __init__(self, rng: random.Random | None = None):
		self.rng = rng
		self.settings = get_settings()

	def forecast(self, location: str, seed: int | None = None) -> ForecastResponse:
		if not location.strip():
			raise ValueError("location is required for a weather forecast")

		rng = self.rng or random.Random(seed)
		now = datetime.now(UTC)
		days = simulate_forecast(now.date(), rng, days=self.settings.forecast_days)
		alerts = farming_alerts(days)
		_logger.info(
			"weather_forecast",
			extra={"location": location, "days": len(days), "alerts": len(alerts)},
		)

		return ForecastResponse(
			location=location,
			generated_at=now,
			days=[
				WeatherDayRead(
					date=day.date,
					temperature_min=day.temperature_min,
					temperature_max=day.temperature_max,
					humidity=day.humidity,
					rainfall=day.rainfall,
					wind_speed=day.wind_speed,
					condition=day.condition,
					uv_index=day.uv_index,
				)
				for day in days
			],
			alerts=[
				FarmingAlertRead(type=alert.type, message=alert.message, recommendation=alert.recommendation)
				for alert in alerts
			],
		)
