"""FastAPI application entrypoint: lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.asyncio import Redis
from sqlalchemy import text

from app.config import get_settings
from app.database import engine
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.routes import advisory, crops, market, weather

logger = logging.getLogger("cropwise")


async def _check_database() -> dict[str, Any]:
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as exc:
        return {"ok": False, "message": str(exc)}
    return {"ok": True, "message": "ok"}


async def _check_redis(app: FastAPI) -> dict[str, Any]:
    redis: Redis | None = getattr(app.state, "redis", None)
    if redis is None:
        return {"ok": False, "message": "redis not connected"}
    try:
        await redis.ping()
    except Exception as exc:
        return {"ok": False, "message": str(exc)}
    return {"ok": True, "message": "ok"}


async def _run_readiness_checks(app: FastAPI) -> dict[str, dict[str, Any]]:
    return {
        "database": await _check_database(),
        "redis": await _check_redis(app),
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Probe the database (a missing crop dataset degrades, never aborts)
      3. Connect to Redis (ranking cache is skipped when unreachable)

    Shutdown:
      1. Close Redis connection pool
      2. Dispose SQLAlchemy engine
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "Cropwise starting",
        extra={
            "log_level": settings.log_level,
            "market_feed_limit": settings.market_feed_limit,
        },
    )

    database = await _check_database()
    if not database["ok"]:
        logger.warning("database unreachable at startup", extra={"error": database["message"]})

    redis: Redis | None = Redis.from_url(settings.redis_url, decode_responses=True)
    try:
        await redis.ping()
    except Exception as exc:
        logger.warning("redis unreachable at startup", extra={"error": str(exc)})
        await redis.aclose()
        redis = None
    app.state.redis = redis

    yield

    logger.info("Cropwise shutting down")
    if redis is not None:
        await redis.aclose()
    await engine.dispose()


app = FastAPI(
    title="Cropwise API",
    description=(
        "Farm advisory API: nearest-match crop recommendation with yield, "
        "risk and profitability scoring, fertilizer dosage planning, profit "
        "analysis, market profitability ranking and simulated weather alerts."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check: verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "cropwise",
        "version": "0.1.0",
    }


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> JSONResponse:
    """Readiness: database and Redis reachability."""
    checks = await _run_readiness_checks(app)
    ready = all(item["ok"] for item in checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ok" if ready else "degraded", "checks": checks},
    )


# ── Router registration ────────────────────────────────────────────────────
app.include_router(advisory.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
app.include_router(market.router, prefix="/api/v1")
app.include_router(weather.router, prefix="/api/v1")
