"""Nearest-match crop classifier over the reference dataset.

Distance is plain Euclidean over the seven raw soil dimensions. No
normalization is applied, so high-magnitude dimensions such as rainfall
dominate the match; z-score normalization is a candidate improvement but
would change which crop is returned for existing inputs.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from app.engine.types import CropRecord, SoilProfile
from app.models.enums import PredictionSourceEnum


class DataUnavailable(LookupError):
	"""Raised when the crop reference dataset cannot be used."""


def distance(profile: SoilProfile, record: CropRecord) -> float:
	return math.sqrt(
		sum((a - b) ** 2 for a, b in zip(profile.as_vector(), record.as_vector(), strict=True))
	)


def nearest_record(profile: SoilProfile, dataset: Iterable[CropRecord]) -> CropRecord:
	best: CropRecord | None = None
	best_distance = math.inf
	for record in dataset:
		current = distance(profile, record)
		# strict comparison keeps the first record on exact ties
		if current < best_distance:
			best = record
			best_distance = current
	if best is None:
		raise DataUnavailable("crop reference dataset is empty")
	return best


def classify(profile: SoilProfile, dataset: Iterable[CropRecord]) -> str:
	"""Return the label of the dataset record closest to ``profile``."""
	return nearest_record(profile, dataset).crop_label


def fallback_crop(profile: SoilProfile) -> str:
	"""Threshold cascade used when no reference dataset is available."""
	if profile.nitrogen > 50 and profile.phosphorus > 30 and profile.potassium > 40:
		return "wheat"
	if profile.temperature > 30 and profile.humidity > 70 and profile.rainfall > 150:
		return "rice"
	if 6 < profile.ph < 7 and profile.potassium > 35:
		return "maize"
	return "cotton"


def classify_or_fallback(
	profile: SoilProfile,
	dataset: Iterable[CropRecord],
) -> tuple[str, PredictionSourceEnum]:
	try:
		return classify(profile, dataset), PredictionSourceEnum.dataset
	except DataUnavailable:
		return fallback_crop(profile), PredictionSourceEnum.heuristic
