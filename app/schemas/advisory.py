"""Pydantic schemas for crop prediction, fertilizer and profit endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.engine.types import (
	FertilizerAdvice,
	NutrientLevels,
	PredictionResult,
	ProfitAnalysis,
	ProfitInputs,
	SoilProfile,
)
from app.models.enums import (
	AmendmentTypeEnum,
	PredictionSourceEnum,
	PriorityEnum,
	RiskLevelEnum,
)
from app.schemas.inputs import LenientFloat, NonNegativeFloat, Percentage, PhValue

# ── Requests ────────────────────────────────────────────────────────────────


class SoilProfileIn(BaseModel):
	temperature: LenientFloat = 25
	humidity: Percentage = 65
	ph: PhValue = 6.5
	rainfall: NonNegativeFloat = 120
	nitrogen: NonNegativeFloat = 40
	phosphorus: NonNegativeFloat = 25
	potassium: NonNegativeFloat = 30

	def to_profile(self) -> SoilProfile:
		return SoilProfile(
			temperature=self.temperature,
			humidity=self.humidity,
			ph=self.ph,
			rainfall=self.rainfall,
			nitrogen=self.nitrogen,
			phosphorus=self.phosphorus,
			potassium=self.potassium,
		)


class PredictRequest(SoilProfileIn):
	include_fertilizer: bool = False
	organic_matter: NonNegativeFloat = 3.5


class FertilizerRequest(BaseModel):
	nitrogen: NonNegativeFloat = 30
	phosphorus: NonNegativeFloat = 20
	potassium: NonNegativeFloat = 25
	ph: PhValue = 6.5
	organic_matter: NonNegativeFloat = 3.5
	crop_type: str = Field(default="wheat", max_length=100)

	def to_levels(self) -> NutrientLevels:
		return NutrientLevels(
			nitrogen=self.nitrogen,
			phosphorus=self.phosphorus,
			potassium=self.potassium,
			ph=self.ph,
			organic_matter=self.organic_matter,
			crop_type=self.crop_type.strip().lower() or "wheat",
		)


class ProfitRequest(BaseModel):
	crop_type: str = Field(default="wheat", max_length=100)
	area_acres: NonNegativeFloat = 1
	expected_yield: NonNegativeFloat = 20
	selling_price: NonNegativeFloat = 2500
	seed_cost: NonNegativeFloat = 3000
	fertilizer_cost: NonNegativeFloat = 8000
	labor_cost: NonNegativeFloat = 12000
	irrigation_cost: NonNegativeFloat = 5000
	other_costs: NonNegativeFloat = 2000

	def to_inputs(self) -> ProfitInputs:
		return ProfitInputs(**self.model_dump())


# ── Responses ───────────────────────────────────────────────────────────────


class FertilizerAdviceRead(BaseModel):
	type: AmendmentTypeEnum
	name: str
	amount: str
	amount_low: float
	amount_high: float
	unit: str
	application_method: str
	timing: str
	benefits: list[str] = Field(default_factory=list)
	priority: PriorityEnum

	@classmethod
	def from_advice(cls, advice: FertilizerAdvice) -> "FertilizerAdviceRead":
		return cls(
			type=advice.amendment,
			name=advice.name,
			amount=str(advice.amount),
			amount_low=advice.amount.low,
			amount_high=advice.amount.high,
			unit=advice.amount.unit,
			application_method=advice.application_method,
			timing=advice.timing,
			benefits=list(advice.benefits),
			priority=advice.priority,
		)


class PredictionRead(BaseModel):
	crop_label: str
	crop_name: str
	yield_index: int
	risk_level: RiskLevelEnum
	confidence_score: float
	profitability_index: int
	recommendations: list[str] = Field(default_factory=list)
	source: PredictionSourceEnum

	@classmethod
	def from_result(cls, result: PredictionResult) -> "PredictionRead":
		return cls(
			crop_label=result.crop_label,
			crop_name=result.crop_name,
			yield_index=result.yield_index,
			risk_level=result.risk_level,
			confidence_score=result.confidence_score,
			profitability_index=result.profitability_index,
			recommendations=list(result.recommendations),
			source=result.source,
		)


class PredictionResponse(BaseModel):
	generated_at: datetime
	prediction: PredictionRead
	fertilizer: list[FertilizerAdviceRead] = Field(default_factory=list)
	notices: list[str] = Field(default_factory=list)


class FertilizerPlanResponse(BaseModel):
	crop_type: str
	generated_at: datetime
	items: list[FertilizerAdviceRead] = Field(default_factory=list)


class ProfitAnalysisResponse(BaseModel):
	crop_type: str
	total_revenue: float
	total_costs: float
	gross_profit: float
	profit_margin: float
	roi_percentage: float
	break_even_yield: float
	profit_per_acre: float
	risk_assessment: RiskLevelEnum
	recommendations: list[str] = Field(default_factory=list)

	@classmethod
	def from_analysis(cls, crop_type: str, analysis: ProfitAnalysis) -> "ProfitAnalysisResponse":
		return cls(
			crop_type=crop_type,
			total_revenue=analysis.total_revenue,
			total_costs=analysis.total_costs,
			gross_profit=analysis.gross_profit,
			profit_margin=analysis.profit_margin,
			roi_percentage=analysis.roi_percentage,
			break_even_yield=analysis.break_even_yield,
			profit_per_acre=analysis.profit_per_acre,
			risk_assessment=analysis.risk_assessment,
			recommendations=list(analysis.recommendations),
		)


class ProfitDefaultsRead(BaseModel):
	crop_type: str
	expected_yield: float
	selling_price: float
