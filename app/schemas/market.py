"""Pydantic schemas for market price and profitability endpoints."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import PriceTrendEnum
from app.schemas.inputs import NonNegativeFloat


class MarketPriceCreate(BaseModel):
	crop_name: str = Field(min_length=1, max_length=100)
	price_per_kg: NonNegativeFloat
	market_location: str = Field(min_length=1, max_length=255)
	price_date: date


class MarketPriceRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	crop_name: str
	price_per_kg: float
	market_location: str
	price_date: date
	created_at: datetime


class MarketPriceListRead(BaseModel):
	items: list[MarketPriceRead] = Field(default_factory=list)


class CropProfitabilityRead(BaseModel):
	crop_name: str
	avg_price: float
	trend: PriceTrendEnum
	profitability_score: int
	market_count: int


class ProfitabilityResponse(BaseModel):
	generated_at: datetime
	cached: bool = False
	sample_size: int = 0
	items: list[CropProfitabilityRead] = Field(default_factory=list)
	notices: list[str] = Field(default_factory=list)
