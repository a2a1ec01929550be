import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI

from order_service.config import settings
from order_service.database import check_database, create_tables, engine
from order_service.application.interfaces import CacheBackend
from order_service.presentation.api import router
from order_service.presentation.dependencies import get_cache_backend
from order_service.presentation.schemas import HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    await create_tables()
    logger.info("Tables ready")

    if await get_cache_backend().ping():
        logger.info(f"Cache backend '{settings.CACHE_BACKEND}' reachable")
    else:
        logger.warning(f"Cache backend '{settings.CACHE_BACKEND}' not reachable")

    yield

    logger.info("Shutting down...")
    await get_cache_backend().close()
    await engine.dispose()


app = FastAPI(
    title="Order Service",
    description="Orders with product stock reservation and cached reads",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(router, prefix="/api")


@app.get("/health", response_model=HealthResponse)
async def health(cache: CacheBackend = Depends(get_cache_backend)):
    database_ok = await check_database()
    cache_ok = await cache.ping()
    return HealthResponse(
        status="healthy" if database_ok and cache_ok else "degraded",
        database=database_ok,
        cache=cache_ok
    )
