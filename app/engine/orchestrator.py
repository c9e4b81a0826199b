"""Advisory orchestrator: classifier, scorer and fertilizer planner composed."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from app.engine import classifier, fertilizer, scorer
from app.engine.scorer import ConfidenceScorer
from app.engine.types import (
	AdvisoryBundle,
	AgronomicScore,
	CropRecord,
	NutrientLevels,
	PredictionResult,
	SoilProfile,
)
from app.models.enums import RiskLevelEnum


class CropDatasetSource(Protocol):
	"""Read-only access to the crop reference dataset."""

	def load(self) -> Sequence[CropRecord]: ...


class StaticCropDataset:
	"""In-memory dataset, e.g. rows already fetched from the database."""

	def __init__(self, records: Iterable[CropRecord] = ()):
		self._records = tuple(records)

	def load(self) -> Sequence[CropRecord]:
		return self._records

	def __len__(self) -> int:
		return len(self._records)


def display_name(crop_label: str) -> str:
	return crop_label[:1].upper() + crop_label[1:]


def build_recommendations(crop_name: str, result: AgronomicScore) -> list[str]:
	return [
		f"{crop_name} is highly suitable for your soil conditions",
		f"Expected yield: {result.yield_index}% of optimal capacity",
		"Consider soil amendment before planting"
		if result.risk_level == RiskLevelEnum.high
		else "Soil conditions are favorable",
		f"Profitability index: {result.profitability_index}/100",
	]


class AdvisoryOrchestrator:
	def __init__(self, dataset: CropDatasetSource, confidence: ConfidenceScorer | None = None):
		self.dataset = dataset
		self.confidence = confidence or ConfidenceScorer()

	def recommend(self, profile: SoilProfile) -> PredictionResult:
		crop_label, source = classifier.classify_or_fallback(profile, self.dataset.load())
		result = scorer.score(profile, crop_label)
		crop_name = display_name(crop_label)
		return PredictionResult(
			crop_label=crop_label,
			crop_name=crop_name,
			yield_index=result.yield_index,
			risk_level=result.risk_level,
			confidence_score=self.confidence(),
			profitability_index=result.profitability_index,
			recommendations=tuple(build_recommendations(crop_name, result)),
			source=source,
		)

	def advise(self, profile: SoilProfile, organic_matter: float = 3.5) -> AdvisoryBundle:
		"""Prediction plus fertilizer advice for the predicted crop."""
		prediction = self.recommend(profile)
		levels = NutrientLevels(
			nitrogen=profile.nitrogen,
			phosphorus=profile.phosphorus,
			potassium=profile.potassium,
			ph=profile.ph,
			organic_matter=organic_matter,
			crop_type=prediction.crop_label.lower(),
		)
		return AdvisoryBundle(prediction=prediction, fertilizer=tuple(fertilizer.plan(levels)))
