"""Immutable value objects passed into and returned from the advisory engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from app.models.enums import (
	AlertTypeEnum,
	AmendmentTypeEnum,
	PredictionSourceEnum,
	PriceTrendEnum,
	PriorityEnum,
	RiskLevelEnum,
	WeatherConditionEnum,
)

# ── Soil & crop reference ───────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SoilProfile:
	"""Seven-field description of a plot's growing conditions."""

	temperature: float
	humidity: float
	ph: float
	rainfall: float
	nitrogen: float
	phosphorus: float
	potassium: float

	def as_vector(self) -> tuple[float, ...]:
		return (
			self.temperature,
			self.humidity,
			self.ph,
			self.rainfall,
			self.nitrogen,
			self.phosphorus,
			self.potassium,
		)


@dataclass(frozen=True, slots=True)
class CropRecord:
	"""A labeled reference soil profile used for nearest-neighbor matching."""

	crop_label: str
	temperature: float
	humidity: float
	ph: float
	rainfall: float
	nitrogen: float
	phosphorus: float
	potassium: float

	def as_vector(self) -> tuple[float, ...]:
		return (
			self.temperature,
			self.humidity,
			self.ph,
			self.rainfall,
			self.nitrogen,
			self.phosphorus,
			self.potassium,
		)


# ── Prediction ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AgronomicScore:
	risk_level: RiskLevelEnum
	yield_index: int
	profitability_index: int


@dataclass(frozen=True, slots=True)
class PredictionResult:
	crop_label: str
	crop_name: str
	yield_index: int
	risk_level: RiskLevelEnum
	confidence_score: float
	profitability_index: int
	recommendations: tuple[str, ...]
	source: PredictionSourceEnum = PredictionSourceEnum.dataset


# ── Fertilizer ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NutrientLevels:
	nitrogen: float
	phosphorus: float
	potassium: float
	ph: float
	organic_matter: float = 3.5
	crop_type: str = "wheat"


@dataclass(frozen=True, slots=True)
class DoseAmount:
	"""Application rate; ``low == high`` for a single-value dose."""

	low: float
	high: float
	unit: str

	def __str__(self) -> str:
		if self.low == self.high:
			return f"{_format_quantity(self.low)} {self.unit}"
		return f"{_format_quantity(self.low)}-{_format_quantity(self.high)} {self.unit}"


@dataclass(frozen=True, slots=True)
class FertilizerAdvice:
	amendment: AmendmentTypeEnum
	name: str
	amount: DoseAmount
	application_method: str
	timing: str
	benefits: tuple[str, ...]
	priority: PriorityEnum


@dataclass(frozen=True, slots=True)
class AdvisoryBundle:
	prediction: PredictionResult
	fertilizer: tuple[FertilizerAdvice, ...] = ()


# ── Profit ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ProfitInputs:
	crop_type: str
	area_acres: float
	expected_yield: float
	selling_price: float
	seed_cost: float = 0.0
	fertilizer_cost: float = 0.0
	labor_cost: float = 0.0
	irrigation_cost: float = 0.0
	other_costs: float = 0.0

	@property
	def total_costs(self) -> float:
		return (
			self.seed_cost
			+ self.fertilizer_cost
			+ self.labor_cost
			+ self.irrigation_cost
			+ self.other_costs
		)


@dataclass(frozen=True, slots=True)
class ProfitAnalysis:
	total_revenue: float
	total_costs: float
	gross_profit: float
	profit_margin: float
	roi_percentage: float
	break_even_yield: float
	profit_per_acre: float
	risk_assessment: RiskLevelEnum
	recommendations: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CropProfitDefaults:
	crop_type: str
	expected_yield: float
	selling_price: float


# ── Market ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MarketPriceRecord:
	crop_name: str
	price_per_kg: float
	market_location: str
	price_date: date


@dataclass(frozen=True, slots=True)
class CropProfitability:
	crop_name: str
	avg_price: float
	trend: PriceTrendEnum
	profitability_score: int
	market_count: int


# ── Weather ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class WeatherDay:
	date: date
	temperature_min: int
	temperature_max: int
	humidity: int
	rainfall: float
	wind_speed: int
	condition: WeatherConditionEnum
	uv_index: int


@dataclass(frozen=True, slots=True)
class FarmingAlert:
	type: AlertTypeEnum
	message: str
	recommendation: str


def _format_quantity(value: float) -> str:
	return str(int(value)) if float(value).is_integer() else f"{value:g}"
