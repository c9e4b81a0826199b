"""Crop advisory service: dataset loading, prediction, fertilizer and profit."""

from __future__ import annotations

import logging
import random
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.engine import fertilizer, profit
from app.engine.orchestrator import AdvisoryOrchestrator, StaticCropDataset
from app.engine.scorer import ConfidenceScorer
from app.engine.types import NutrientLevels, ProfitInputs, SoilProfile
from app.models.enums import PredictionSourceEnum
from app.schemas.advisory import (
	FertilizerAdviceRead,
	FertilizerPlanResponse,
	PredictionRead,
	PredictionResponse,
	ProfitAnalysisResponse,
	ProfitDefaultsRead,
)
from app.services.dataset_service import CropDatasetService

_logger = logging.getLogger("cropwise.advisory")

DATASET_UNAVAILABLE_NOTICE = "Crop reference dataset unavailable; recommendation uses rule-based fallback."


def confidence_from_settings(settings: Settings, rng: random.Random | None = None) -> ConfidenceScorer:
	return ConfidenceScorer(
		baseline=settings.confidence_baseline,
		jitter=settings.confidence_jitter,
		lower=settings.confidence_min,
		upper=settings.confidence_max,
		rng=rng,
	)


class AdvisoryService:
	def __init__(self, db: AsyncSession, rng: random.Random | None = None):
		self.db = db
		self.rng = rng
		self.settings = get_settings()

	async def load_dataset(self) -> StaticCropDataset:
		"""Fetch the reference dataset; an unreachable store yields an empty one."""
		try:
			records = await CropDatasetService(self.db).fetch_records()
		except (SQLAlchemyError, OSError) as exc:
			_logger.warning("crop_dataset_unavailable", extra={"error": str(exc)})
			return StaticCropDataset()
		return StaticCropDataset(records)

	async def predict(
		self,
		profile: SoilProfile,
		include_fertilizer: bool = False,
		organic_matter: float = 3.5,
	) -> PredictionResponse:
		dataset = await self.load_dataset()
		orchestrator = AdvisoryOrchestrator(dataset, confidence_from_settings(self.settings, self.rng))
		bundle = orchestrator.advise(profile, organic_matter=organic_matter)

		notices: list[str] = []
		if bundle.prediction.source == PredictionSourceEnum.heuristic:
			notices.append(DATASET_UNAVAILABLE_NOTICE)
			_logger.info(
				"prediction_fallback",
				extra={"crop_label": bundle.prediction.crop_label, "dataset_size": len(dataset)},
			)

		return PredictionResponse(
			generated_at=datetime.now(UTC),
			prediction=PredictionRead.from_result(bundle.prediction),
			fertilizer=(
				[FertilizerAdviceRead.from_advice(item) for item in bundle.fertilizer]
				if include_fertilizer
				else []
			),
			notices=notices,
		)

	@staticmethod
	def fertilizer_plan(levels: NutrientLevels) -> FertilizerPlanResponse:
		items = fertilizer.plan(levels)
		return FertilizerPlanResponse(
			crop_type=levels.crop_type,
			generated_at=datetime.now(UTC),
			items=[FertilizerAdviceRead.from_advice(item) for item in items],
		)

	@staticmethod
	def analyze_profit(inputs: ProfitInputs) -> ProfitAnalysisResponse:
		return ProfitAnalysisResponse.from_analysis(inputs.crop_type, profit.analyze(inputs))

	@staticmethod
	def profit_defaults(crop_type: str) -> ProfitDefaultsRead:
		defaults = profit.profit_defaults(crop_type)
		return ProfitDefaultsRead(
			crop_type=defaults.crop_type,
			expected_yield=defaults.expected_yield,
			selling_price=defaults.selling_price,
		)
