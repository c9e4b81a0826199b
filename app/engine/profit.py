"""Per-crop profit analysis: revenue, margin, ROI, break-even, risk."""

from __future__ import annotations

from app.engine.numeric import safe_ratio
from app.engine.types import CropProfitDefaults, ProfitAnalysis, ProfitInputs
from app.models.enums import RiskLevelEnum

# expected yield (quintals/acre) and selling price (per quintal)
_PROFIT_DEFAULTS: dict[str, tuple[float, float]] = {
	"wheat": (20, 2500),
	"rice": (25, 2200),
	"maize": (30, 2000),
	"cotton": (8, 6000),
}


def profit_defaults(crop_type: str) -> CropProfitDefaults:
	key = crop_type.strip().lower()
	if key not in _PROFIT_DEFAULTS:
		raise LookupError(f"no profit defaults for crop {crop_type!r}")
	expected_yield, selling_price = _PROFIT_DEFAULTS[key]
	return CropProfitDefaults(crop_type=key, expected_yield=expected_yield, selling_price=selling_price)


def _risk_assessment(profit_margin: float) -> RiskLevelEnum:
	if profit_margin < 10:
		return RiskLevelEnum.high
	if profit_margin < 25:
		return RiskLevelEnum.medium
	return RiskLevelEnum.low


def _recommendations(
	inputs: ProfitInputs,
	total_costs: float,
	profit_margin: float,
	roi: float,
	break_even_yield: float,
) -> list[str]:
	notes: list[str] = []
	if profit_margin < 0:
		notes.append("Current projection shows losses. Consider cost optimization or crop change.")
	elif profit_margin < 15:
		notes.append("Low profit margins detected. Focus on reducing input costs.")
	else:
		notes.append("Good profit potential identified for this crop selection.")

	if roi < 20:
		notes.append("Consider crops with higher market demand for better returns.")
	if inputs.labor_cost > total_costs * 0.4:
		notes.append("Labor costs are high. Consider mechanization opportunities.")
	if inputs.fertilizer_cost > total_costs * 0.3:
		notes.append("Fertilizer costs are significant. Explore organic alternatives.")

	notes.append(f"Break-even yield: {break_even_yield:.1f} quintals per acre")
	return notes


def analyze(inputs: ProfitInputs) -> ProfitAnalysis:
	total_revenue = inputs.area_acres * inputs.expected_yield * inputs.selling_price
	total_costs = inputs.total_costs
	gross_profit = total_revenue - total_costs

	profit_margin = safe_ratio(gross_profit, total_revenue) * 100
	roi = safe_ratio(gross_profit, total_costs) * 100
	break_even_yield = safe_ratio(total_costs, inputs.selling_price * inputs.area_acres)
	profit_per_acre = safe_ratio(gross_profit, inputs.area_acres)

	return ProfitAnalysis(
		total_revenue=total_revenue,
		total_costs=total_costs,
		gross_profit=gross_profit,
		profit_margin=profit_margin,
		roi_percentage=roi,
		break_even_yield=break_even_yield,
		profit_per_acre=profit_per_acre,
		risk_assessment=_risk_assessment(profit_margin),
		recommendations=tuple(
			_recommendations(inputs, total_costs, profit_margin, roi, break_even_yield)
		),
	)
