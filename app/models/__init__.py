"""ORM model registry: importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

# ── Crop reference ──────────────────────────────────────────────────────────
from app.models.crops import CropDatasetRow

# ── Enums ───────────────────────────────────────────────────────────────────
from app.models.enums import (
    AlertTypeEnum,
    AmendmentTypeEnum,
    PredictionSourceEnum,
    PriceTrendEnum,
    PriorityEnum,
    RiskLevelEnum,
    WeatherConditionEnum,
)

# ── Market feed ─────────────────────────────────────────────────────────────
from app.models.market import MarketPrice

__all__ = [
    "AlertTypeEnum",
    "AmendmentTypeEnum",
    # Base & mixins
    "Base",
    # Crop reference
    "CropDatasetRow",
    # Market
    "MarketPrice",
    "PredictionSourceEnum",
    "PriceTrendEnum",
    "PriorityEnum",
    "RiskLevelEnum",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "WeatherConditionEnum",
]
