"""Fertilizer dosage planner.

Every rule is evaluated independently, so a profile can trigger any number of
amendments. The micronutrient mix is always appended as baseline advice. The
result is ordered by priority rank (high, medium, low); ``sorted`` is stable,
so entries of equal priority keep rule-evaluation order.
"""

from __future__ import annotations

from app.engine.numeric import round_half_up
from app.engine.types import DoseAmount, FertilizerAdvice, NutrientLevels
from app.models.enums import AmendmentTypeEnum, PriorityEnum

RATE_UNIT = "kg/hectare"

NITROGEN_TARGET = 40
PHOSPHORUS_TARGET = 30
POTASSIUM_TARGET = 35
ORGANIC_MATTER_TARGET = 3.0


def _dose(quantity: float) -> DoseAmount:
	value = float(round_half_up(quantity))
	return DoseAmount(low=value, high=value, unit=RATE_UNIT)


def _nitrogen(levels: NutrientLevels) -> FertilizerAdvice | None:
	if levels.nitrogen >= NITROGEN_TARGET:
		return None
	return FertilizerAdvice(
		amendment=AmendmentTypeEnum.nitrogen,
		name="Nitrogen Fertilizer (Urea)",
		amount=_dose((NITROGEN_TARGET - levels.nitrogen) * 2.5),
		application_method="Split application: 50% at sowing, 50% at tillering",
		timing="Pre-sowing and 4-6 weeks after sowing",
		benefits=("Improved leaf growth", "Better protein content", "Enhanced yield"),
		priority=PriorityEnum.high if levels.nitrogen < 25 else PriorityEnum.medium,
	)


def _phosphorus(levels: NutrientLevels) -> FertilizerAdvice | None:
	if levels.phosphorus >= PHOSPHORUS_TARGET:
		return None
	return FertilizerAdvice(
		amendment=AmendmentTypeEnum.phosphorus,
		name="Phosphorus Fertilizer (DAP)",
		amount=_dose((PHOSPHORUS_TARGET - levels.phosphorus) * 3),
		application_method="Band placement near seed furrow",
		timing="At sowing time",
		benefits=("Better root development", "Improved flowering", "Enhanced seed formation"),
		priority=PriorityEnum.high if levels.phosphorus < 15 else PriorityEnum.medium,
	)


def _potassium(levels: NutrientLevels) -> FertilizerAdvice | None:
	if levels.potassium >= POTASSIUM_TARGET:
		return None
	return FertilizerAdvice(
		amendment=AmendmentTypeEnum.potassium,
		name="Potassium Fertilizer (MOP)",
		amount=_dose((POTASSIUM_TARGET - levels.potassium) * 2),
		application_method="Broadcasting and incorporation",
		timing="Pre-sowing preparation",
		benefits=("Disease resistance", "Drought tolerance", "Better grain quality"),
		priority=PriorityEnum.high if levels.potassium < 20 else PriorityEnum.medium,
	)


def _ph_correction(levels: NutrientLevels) -> FertilizerAdvice | None:
	if levels.ph < 6.0:
		return FertilizerAdvice(
			amendment=AmendmentTypeEnum.lime,
			name="Lime Application",
			amount=_dose((6.5 - levels.ph) * 500),
			application_method="Broadcasting and deep incorporation",
			timing="2-3 months before sowing",
			benefits=("pH correction", "Better nutrient availability", "Improved soil structure"),
			priority=PriorityEnum.high,
		)
	if levels.ph > 8.0:
		return FertilizerAdvice(
			amendment=AmendmentTypeEnum.gypsum,
			name="Gypsum Application",
			amount=_dose((levels.ph - 7.5) * 300),
			application_method="Surface application and irrigation",
			timing="Before sowing season",
			benefits=("pH reduction", "Calcium supply", "Soil structure improvement"),
			priority=PriorityEnum.medium,
		)
	return None


def _organic(levels: NutrientLevels) -> FertilizerAdvice | None:
	if levels.organic_matter >= ORGANIC_MATTER_TARGET:
		return None
	return FertilizerAdvice(
		amendment=AmendmentTypeEnum.organic,
		name="Organic Compost",
		amount=DoseAmount(low=2, high=3, unit="tons/hectare"),
		application_method="Broadcasting and incorporation",
		timing="During land preparation",
		benefits=("Soil health improvement", "Water retention", "Microbial activity"),
		priority=PriorityEnum.medium,
	)


def _micronutrients(_levels: NutrientLevels) -> FertilizerAdvice:
	return FertilizerAdvice(
		amendment=AmendmentTypeEnum.micronutrient,
		name="Micronutrient Mix (Zn, Fe, Mn, B)",
		amount=DoseAmount(low=5, high=10, unit=RATE_UNIT),
		application_method="Soil application or foliar spray",
		timing="At vegetative growth stage",
		benefits=("Enzyme activation", "Better photosynthesis", "Quality improvement"),
		priority=PriorityEnum.low,
	)


_RULES = (
	_nitrogen,
	_phosphorus,
	_potassium,
	_ph_correction,
	_organic,
	_micronutrients,
)


def plan(levels: NutrientLevels) -> list[FertilizerAdvice]:
	"""Return amendment advice for ``levels``, highest priority first."""
	advice = [item for rule in _RULES if (item := rule(levels)) is not None]
	return sorted(advice, key=lambda item: item.priority.rank, reverse=True)
