"""Crop prediction, fertilizer planning and profit analysis routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.advisory import (
	FertilizerPlanResponse,
	FertilizerRequest,
	PredictionResponse,
	PredictRequest,
	ProfitAnalysisResponse,
	ProfitDefaultsRead,
	ProfitRequest,
)
from app.services.advisory_service import AdvisoryService

router = APIRouter(prefix="/advisory", tags=["advisory"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="advisory failure")


@router.post("/predict", response_model=PredictionResponse)
async def predict_crop(
	payload: PredictRequest,
	db: AsyncSession = Depends(get_db),
) -> PredictionResponse:
	service = AdvisoryService(db)
	try:
		return await service.predict(
			payload.to_profile(),
			include_fertilizer=payload.include_fertilizer,
			organic_matter=payload.organic_matter,
		)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/fertilizer", response_model=FertilizerPlanResponse)
async def plan_fertilizer(payload: FertilizerRequest) -> FertilizerPlanResponse:
	try:
		return AdvisoryService.fertilizer_plan(payload.to_levels())
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/profit", response_model=ProfitAnalysisResponse)
async def analyze_profit(payload: ProfitRequest) -> ProfitAnalysisResponse:
	try:
		return AdvisoryService.analyze_profit(payload.to_inputs())
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/profit/defaults/{crop_type}", response_model=ProfitDefaultsRead)
async def get_profit_defaults(crop_type: str) -> ProfitDefaultsRead:
	try:
		return AdvisoryService.profit_defaults(crop_type)
	except Exception as exc:
		raise _map_error(exc) from exc
