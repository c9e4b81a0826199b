"""Lenient numeric field types for form-sourced payloads.

Non-numeric or empty values coerce to 0 and out-of-domain values are clamped
instead of rejected, matching how the dashboard forms treat user input.
"""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator


def coerce_number(value: Any) -> float:
	if isinstance(value, bool):
		return float(value)
	if isinstance(value, (int, float)):
		number = float(value)
	elif isinstance(value, str):
		try:
			number = float(value.strip())
		except ValueError:
			return 0.0
	else:
		return 0.0
	if math.isnan(number) or math.isinf(number):
		return 0.0
	return number


def _non_negative(value: float) -> float:
	return max(0.0, value)


def _clamp(lower: float, upper: float):
	def _apply(value: float) -> float:
		return max(lower, min(upper, value))

	return _apply


LenientFloat = Annotated[float, BeforeValidator(coerce_number)]
NonNegativeFloat = Annotated[float, BeforeValidator(coerce_number), AfterValidator(_non_negative)]
Percentage = Annotated[float, BeforeValidator(coerce_number), AfterValidator(_clamp(0.0, 100.0))]
PhValue = Annotated[float, BeforeValidator(coerce_number), AfterValidator(_clamp(0.0, 14.0))]
