"""Market price feed and profitability ranking routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.market import (
	MarketPriceCreate,
	MarketPriceListRead,
	MarketPriceRead,
	ProfitabilityResponse,
)
from app.services.market_service import MarketService

router = APIRouter(prefix="/market", tags=["market"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="market feed failure")


@router.get("/prices", response_model=MarketPriceListRead)
async def list_prices(
	request: Request,
	limit: int | None = Query(default=None, ge=1, le=500),
	db: AsyncSession = Depends(get_db),
) -> MarketPriceListRead:
	service = MarketService(db, getattr(request.app.state, "redis", None))
	try:
		rows = await service.list_recent(limit)
	except Exception as exc:
		raise _map_error(exc) from exc
	return MarketPriceListRead(items=[MarketPriceRead.model_validate(row) for row in rows])


@router.post("/prices", response_model=MarketPriceRead, status_code=status.HTTP_201_CREATED)
async def add_price(
	payload: MarketPriceCreate,
	request: Request,
	db: AsyncSession = Depends(get_db),
) -> MarketPriceRead:
	service = MarketService(db, getattr(request.app.state, "redis", None))
	try:
		row = await service.add_price(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return MarketPriceRead.model_validate(row)


@router.get("/profitability", response_model=ProfitabilityResponse)
async def get_profitability(
	request: Request,
	limit: int | None = Query(default=None, ge=1, le=500),
	db: AsyncSession = Depends(get_db),
) -> ProfitabilityResponse:
	service = MarketService(db, getattr(request.app.state, "redis", None))
	try:
		return await service.get_profitability(limit)
	except Exception as exc:
		raise _map_error(exc) from exc
