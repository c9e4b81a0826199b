"""Crop reference dataset routes (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.crops import CropDatasetRead, CropRecordRead
from app.services.dataset_service import CropDatasetService

router = APIRouter(prefix="/crops", tags=["crops"])


@router.get("/dataset", response_model=CropDatasetRead)
async def get_dataset(db: AsyncSession = Depends(get_db)) -> CropDatasetRead:
	service = CropDatasetService(db)
	try:
		rows = await service.list_rows()
	except Exception as exc:
		raise HTTPException(
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
			detail="crop reference dataset unavailable",
		) from exc
	return CropDatasetRead(
		count=len(rows),
		items=[CropRecordRead.model_validate(row) for row in rows],
	)
