"""Simulated weather forecast routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.schemas.weather import ForecastRequest, ForecastResponse
from app.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


@router.post("/forecast", response_model=ForecastResponse)
async def get_forecast(payload: ForecastRequest) -> ForecastResponse:
	try:
		return WeatherService().forecast(payload.location, seed=payload.seed)
	except ValueError as exc:
		raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
