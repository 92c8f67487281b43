from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fitplan.core.database import Base, engine
import fitplan.models.user  # noqa: F401 register models with Base before create_all
import fitplan.models.tracking  # noqa: F401
import asyncio
from sqlalchemy.exc import OperationalError
from contextlib import asynccontextmanager

from fitplan.api.analytics import router as analytics_router
from fitplan.api.auth import router as auth_router
from fitplan.api.calculators import router as calculators_router
from fitplan.api.exercises import router as exercises_router
from fitplan.api.health import router as health_router
from fitplan.api.profile import router as profile_router
from fitplan.api.subscriptions import router as subscriptions_router
from fitplan.api.tracking import router as tracking_router
from fitplan.core.config import settings
from fitplan.core.exceptions import FitPlanError
import logging

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("fitplan")


async def wait_for_db(engine, retries=10, delay=1):
    for i in range(retries):
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database ready")
            return
        except OperationalError:
            logger.warning("Database not ready, retry %d/%d", i + 1, retries)
            await asyncio.sleep(delay)
    raise RuntimeError("Database not ready after retries")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await wait_for_db(engine)
    yield
    await engine.dispose()


app = FastAPI(title="fitplan", lifespan=lifespan)


@app.exception_handler(FitPlanError)
async def fitplan_error_handler(request: Request, exc: FitPlanError) -> JSONResponse:
    logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, **({"context": exc.details} if exc.details else {})},
    )


app.include_router(health_router)
app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(calculators_router)
app.include_router(exercises_router)
app.include_router(subscriptions_router)
app.include_router(tracking_router)
app.include_router(analytics_router)
