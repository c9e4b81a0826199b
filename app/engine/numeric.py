"""Small numeric helpers shared by the engine modules."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
	"""Round to the nearest integer with .5 going up (not banker's rounding)."""
	return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float) -> float:
	"""``numerator / denominator``, or 0 when the denominator is not positive."""
	if denominator > 0:
		return numerator / denominator
	return 0.0
