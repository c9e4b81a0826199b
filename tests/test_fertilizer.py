from __future__ import annotations

from app.engine.fertilizer import plan
from app.engine.types import DoseAmount, NutrientLevels
from app.models.enums import AmendmentTypeEnum, PriorityEnum


def test_deficient_acidic_soil_triggers_every_rule() -> None:
	advice = plan(
		NutrientLevels(nitrogen=20, phosphorus=10, potassium=15, ph=5.0, organic_matter=2.0)
	)

	assert [item.amendment for item in advice] == [
		AmendmentTypeEnum.nitrogen,
		AmendmentTypeEnum.phosphorus,
		AmendmentTypeEnum.potassium,
		AmendmentTypeEnum.lime,
		AmendmentTypeEnum.organic,
		AmendmentTypeEnum.micronutrient,
	]
	assert [item.priority for item in advice] == [
		PriorityEnum.high,
		PriorityEnum.high,
		PriorityEnum.high,
		PriorityEnum.high,
		PriorityEnum.medium,
		PriorityEnum.low,
	]
	assert str(advice[0].amount) == "50 kg/hectare"
	assert str(advice[1].amount) == "60 kg/hectare"
	assert str(advice[2].amount) == "40 kg/hectare"
	assert str(advice[3].amount) == "750 kg/hectare"
	assert str(advice[4].amount) == "2-3 tons/hectare"
	assert advice[5].amount == DoseAmount(low=5, high=10, unit="kg/hectare")


def test_healthy_soil_only_gets_micronutrients() -> None:
	advice = plan(NutrientLevels(nitrogen=60, phosphorus=40, potassium=50, ph=6.8))
	assert len(advice) == 1
	assert advice[0].amendment == AmendmentTypeEnum.micronutrient
	assert advice[0].priority == PriorityEnum.low


def test_alkaline_soil_gets_gypsum() -> None:
	advice = plan(NutrientLevels(nitrogen=60, phosphorus=40, potassium=50, ph=8.5))
	gypsum = next(item for item in advice if item.amendment == AmendmentTypeEnum.gypsum)
	assert gypsum.priority == PriorityEnum.medium
	assert str(gypsum.amount) == "300 kg/hectare"
	assert all(item.amendment != AmendmentTypeEnum.lime for item in advice)


def test_moderate_deficits_are_medium_priority() -> None:
	advice = plan(NutrientLevels(nitrogen=30, phosphorus=20, potassium=25, ph=6.5))
	by_type = {item.amendment: item for item in advice}
	assert by_type[AmendmentTypeEnum.nitrogen].priority == PriorityEnum.medium
	assert by_type[AmendmentTypeEnum.phosphorus].priority == PriorityEnum.medium
	assert by_type[AmendmentTypeEnum.potassium].priority == PriorityEnum.medium
	assert str(by_type[AmendmentTypeEnum.nitrogen].amount) == "25 kg/hectare"
	assert str(by_type[AmendmentTypeEnum.phosphorus].amount) == "30 kg/hectare"
	assert str(by_type[AmendmentTypeEnum.potassium].amount) == "20 kg/hectare"


def test_thresholds_are_exclusive() -> None:
	advice = plan(
		NutrientLevels(nitrogen=40, phosphorus=30, potassium=35, ph=6.0, organic_matter=3.0)
	)
	assert [item.amendment for item in advice] == [AmendmentTypeEnum.micronutrient]


def test_plan_is_sorted_by_priority() -> None:
	advice = plan(NutrientLevels(nitrogen=30, phosphorus=10, potassium=30, ph=8.8, organic_matter=1.0))
	ranks = [item.priority.rank for item in advice]
	assert ranks == sorted(ranks, reverse=True)
	assert advice[0].amendment == AmendmentTypeEnum.phosphorus
	assert advice[-1].amendment == AmendmentTypeEnum.micronutrient
	medium = [item.amendment for item in advice if item.priority == PriorityEnum.medium]
	assert medium == [
		AmendmentTypeEnum.nitrogen,
		AmendmentTypeEnum.potassium,
		AmendmentTypeEnum.gypsum,
		AmendmentTypeEnum.organic,
	]
