"""CropDatasetRow ORM model: labeled soil-profile reference table.

Rows are seeded once (``scripts/seed_db.py``) and read in full by the
advisory service; the engine never writes to this table.
"""

from __future__ import annotations

from sqlalchemy import Float, Identity, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class CropDatasetRow(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """One labeled reference point: crop label + seven soil/climate values."""

    __tablename__ = "crop_dataset"
    __table_args__ = (Index("ix_crop_dataset_label", "crop_label"),)

    # insertion sequence; nearest-match ties go to the lowest ordinal
    ordinal: Mapped[int] = mapped_column(Integer, Identity(), nullable=False)
    crop_label: Mapped[str] = mapped_column(String(100), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    humidity: Mapped[float] = mapped_column(Float, nullable=False)
    ph: Mapped[float] = mapped_column(Float, nullable=False)
    rainfall: Mapped[float] = mapped_column(Float, nullable=False)
    nitrogen: Mapped[float] = mapped_column(Float, nullable=False)
    phosphorus: Mapped[float] = mapped_column(Float, nullable=False)
    potassium: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<CropDatasetRow id={self.id} crop={self.crop_label!r}>"
