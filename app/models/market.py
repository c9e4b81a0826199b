"""MarketPrice ORM model: observed crop prices per market and date."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class MarketPrice(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Price per kg of one crop at one market on one date."""

    __tablename__ = "market_prices"
    __table_args__ = (
        Index("ix_market_prices_date", "price_date"),
        Index("ix_market_prices_crop_date", "crop_name", "price_date"),
    )

    crop_name: Mapped[str] = mapped_column(String(100), nullable=False)
    price_per_kg: Mapped[float] = mapped_column(Float, nullable=False)
    market_location: Mapped[str] = mapped_column(String(255), nullable=False)
    price_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<MarketPrice id={self.id} crop={self.crop_name!r} "
            f"market={self.market_location!r} date={self.price_date}>"
        )
