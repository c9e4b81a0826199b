"""Agronomic scoring: risk level, yield index, profitability index, confidence."""

from __future__ import annotations

import random
from collections.abc import Callable

from app.engine.numeric import round_half_up
from app.engine.types import AgronomicScore, SoilProfile
from app.models.enums import RiskLevelEnum

BASE_YIELD = 100

_BASE_PROFITABILITY: dict[str, int] = {
	"rice": 75,
	"wheat": 70,
	"maize": 65,
	"cotton": 80,
}
DEFAULT_PROFITABILITY = 60


def risk_score(profile: SoilProfile) -> int:
	score = 0
	if profile.ph < 5.5 or profile.ph > 8.5:
		score += 2
	if profile.temperature < 10 or profile.temperature > 35:
		score += 2
	if profile.humidity < 30 or profile.humidity > 90:
		score += 1
	if profile.rainfall < 50 or profile.rainfall > 300:
		score += 1
	return score


def risk_level(profile: SoilProfile) -> RiskLevelEnum:
	score = risk_score(profile)
	if score >= 4:
		return RiskLevelEnum.high
	if score >= 2:
		return RiskLevelEnum.medium
	return RiskLevelEnum.low


def _rice_modifier(p: SoilProfile) -> float:
	modifier = 1.0
	if 20 <= p.temperature <= 35 and p.humidity > 60:
		modifier *= 1.3
	if p.rainfall > 150:
		modifier *= 1.2
	return modifier


def _wheat_modifier(p: SoilProfile) -> float:
	modifier = 1.0
	if 15 <= p.temperature <= 25:
		modifier *= 1.25
	if p.nitrogen > 40:
		modifier *= 1.15
	return modifier


def _maize_modifier(p: SoilProfile) -> float:
	modifier = 1.0
	if 18 <= p.temperature <= 32:
		modifier *= 1.2
	if p.phosphorus > 25:
		modifier *= 1.1
	return modifier


def _cotton_modifier(p: SoilProfile) -> float:
	modifier = 1.0
	if 25 <= p.temperature <= 35:
		modifier *= 1.15
	if p.potassium > 30:
		modifier *= 1.1
	return modifier


_CROP_MODIFIERS: dict[str, Callable[[SoilProfile], float]] = {
	"rice": _rice_modifier,
	"wheat": _wheat_modifier,
	"maize": _maize_modifier,
	"cotton": _cotton_modifier,
}


def _ph_modifier(ph: float) -> float:
	if 6 <= ph <= 7.5:
		return 1.15
	if ph < 5.5 or ph > 8:
		return 0.7
	return 1.0


def yield_index(profile: SoilProfile, crop_label: str) -> int:
	crop_modifier = _CROP_MODIFIERS.get(crop_label.strip().lower())
	modifier = crop_modifier(profile) if crop_modifier is not None else 1.0
	modifier *= _ph_modifier(profile.ph)
	return round_half_up(BASE_YIELD * modifier)


def profitability_index(crop_label: str, yield_value: int) -> int:
	base = _BASE_PROFITABILITY.get(crop_label.strip().lower(), DEFAULT_PROFITABILITY)
	return round_half_up(base * (yield_value / 100))


def score(profile: SoilProfile, crop_label: str) -> AgronomicScore:
	yield_value = yield_index(profile, crop_label)
	return AgronomicScore(
		risk_level=risk_level(profile),
		yield_index=yield_value,
		profitability_index=profitability_index(crop_label, yield_value),
	)


class ConfidenceScorer:
	"""Presentation-only confidence figure: a baseline plus bounded jitter.

	This is a UX affordance for the dashboard, not a statistical confidence
	interval. Pass a seeded ``random.Random`` to make it reproducible.
	"""

	def __init__(
		self,
		baseline: float = 88.0,
		jitter: float = 10.0,
		lower: float = 75.0,
		upper: float = 98.0,
		rng: random.Random | None = None,
	):
		if lower > upper:
			raise ValueError("confidence lower bound exceeds upper bound")
		self.baseline = baseline
		self.jitter = jitter
		self.lower = lower
		self.upper = upper
		self.rng = rng or random.Random()

	def __call__(self) -> float:
		raw = self.baseline + self.rng.random() * self.jitter
		return max(self.lower, min(self.upper, raw))
