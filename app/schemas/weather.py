"""Pydantic schemas for the simulated weather outlook."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, field_validator

from app.models.enums import AlertTypeEnum, WeatherConditionEnum


class ForecastRequest(BaseModel):
	location: str = Field(max_length=255)
	seed: int | None = None

	@field_validator("location")
	@classmethod
	def _strip_location(cls, value: str) -> str:
		return value.strip()


class WeatherDayRead(BaseModel):
	date: dt.date
	temperature_min: int
	temperature_max: int
	humidity: int
	rainfall: float
	wind_speed: int
	condition: WeatherConditionEnum
	uv_index: int


class FarmingAlertRead(BaseModel):
	type: AlertTypeEnum
	message: str
	recommendation: str


class ForecastResponse(BaseModel):
	location: str
	generated_at: dt.datetime
	days: list[WeatherDayRead] = Field(default_factory=list)
	alerts: list[FarmingAlertRead] = Field(default_factory=list)
