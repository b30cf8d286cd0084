"""GoGreen Rewards — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.persistence.database import engine
from app.config import settings
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.routes_leaderboard import router as leaderboard_router
from app.infrastructure.api.routes_profiles import router as profiles_router
from app.infrastructure.api.routes_rewards import router as rewards_router
from app.infrastructure.api.routes_trips import router as trips_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="GoGreen Rewards",
        description="Log sustainable trips, earn points and carbon-savings credit",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the web client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(rewards_router, prefix="/api")
    app.include_router(trips_router, prefix="/api")
    app.include_router(profiles_router, prefix="/api")
    app.include_router(leaderboard_router, prefix="/api")

    return app


app = create_app()
