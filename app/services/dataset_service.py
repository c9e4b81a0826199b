"""Crop reference dataset access: full-table reads of ``crop_dataset``."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.engine.types import CropRecord
from app.models.crops import CropDatasetRow


def row_to_record(row: CropDatasetRow) -> CropRecord:
	return CropRecord(
		crop_label=row.crop_label,
		temperature=row.temperature,
		humidity=row.humidity,
		ph=row.ph,
		rainfall=row.rainfall,
		nitrogen=row.nitrogen,
		phosphorus=row.phosphorus,
		potassium=row.potassium,
	)


class CropDatasetService:
	"""Read-only gateway to the labeled crop reference table."""

	def __init__(self, db: AsyncSession):
		self.db = db

	async def list_rows(self) -> list[CropDatasetRow]:
		stmt = select(CropDatasetRow).order_by(CropDatasetRow.ordinal.asc())
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	async def fetch_records(self) -> list[CropRecord]:
		return [row_to_record(row) for row in await self.list_rows()]
