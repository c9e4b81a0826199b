"""Closed enum types shared by the engine, ORM models and API schemas.

Risk and priority carry an explicit ``rank`` so that sorting and threshold
comparisons never depend on string ordering.
"""

from enum import StrEnum

# ── Ranked advisory enums ───────────────────────────────────────────────────


class RiskLevelEnum(StrEnum):
    """Agronomic or financial risk classification."""

    low = "low"
    medium = "medium"
    high = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]


class PriorityEnum(StrEnum):
    """Priority of a fertilizer recommendation."""

    high = "high"
    medium = "medium"
    low = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_RISK_RANK: dict[RiskLevelEnum, int] = {
    RiskLevelEnum.low: 1,
    RiskLevelEnum.medium: 2,
    RiskLevelEnum.high: 3,
}

_PRIORITY_RANK: dict[PriorityEnum, int] = {
    PriorityEnum.high: 3,
    PriorityEnum.medium: 2,
    PriorityEnum.low: 1,
}


# ── Fertilizer enums ────────────────────────────────────────────────────────


class AmendmentTypeEnum(StrEnum):
    """Kind of soil amendment suggested by the dosage planner."""

    nitrogen = "nitrogen"
    phosphorus = "phosphorus"
    potassium = "potassium"
    lime = "lime"
    gypsum = "gypsum"
    organic = "organic"
    micronutrient = "micronutrient"


# ── Prediction enums ────────────────────────────────────────────────────────


class PredictionSourceEnum(StrEnum):
    """Where the recommended crop label came from."""

    dataset = "dataset"
    heuristic = "heuristic"


# ── Market enums ────────────────────────────────────────────────────────────


class PriceTrendEnum(StrEnum):
    """Direction of the latest market price against its recent history."""

    up = "up"
    down = "down"
    stable = "stable"


# ── Weather enums ───────────────────────────────────────────────────────────


class WeatherConditionEnum(StrEnum):
    sunny = "sunny"
    cloudy = "cloudy"
    rainy = "rainy"
    stormy = "stormy"


class AlertTypeEnum(StrEnum):
    """Severity of a farming alert derived from the forecast."""

    warning = "warning"
    info = "info"
    success = "success"
