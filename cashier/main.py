import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from cashier.config import Settings, get_settings
from cashier.core.activation_gate import redirect_if_unlicensed
from cashier.core.http_errors import register_exception_handlers
from cashier.core.logging import setup_logging
from cashier.database import Base, engine, ensure_sqlite_schema
from cashier.dependencies import get_activation_gate, get_activation_service
from cashier.models import import_all_models
from cashier.routers import (
    activation_router,
    catalog_types_router,
    health_router,
    messages_router,
    products_router,
)
from cashier.routers.activation import build_status_response
from cashier.schemas.activation import ActivationStatusResponse
from cashier.services.activation_service import ActivationService
from cashier.services.seed_service import SeedDataService

logger = logging.getLogger(__name__)

setup_logging()
settings: Settings = get_settings()


def init_db() -> None:
    import_all_models()
    Base.metadata.create_all(bind=engine)
    ensure_sqlite_schema()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    logger.info("Database ready at %s", settings.DATABASE_URL)
    if settings.SEED_DATA_ON_STARTUP:
        SeedDataService().seed_database()
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
register_exception_handlers(app)


@app.middleware("http")
async def activation_middleware(request: Request, call_next):
    """Send page navigations to the activation screen while unlicensed."""
    gate_factory = app.dependency_overrides.get(get_activation_gate, get_activation_gate)
    redirect = await run_in_threadpool(redirect_if_unlicensed, request, gate_factory())
    if redirect is not None:
        return redirect
    return await call_next(request)


app.include_router(health_router)
app.include_router(products_router)
app.include_router(catalog_types_router)
app.include_router(activation_router)
app.include_router(messages_router)


@app.get("/")
def root():
    return RedirectResponse(url="/docs", status_code=302)


@app.get(settings.ACTIVATION_PATH, response_model=ActivationStatusResponse)
def activation_page(service: ActivationService = Depends(get_activation_service)):
    return build_status_response(service)


__all__ = ["app", "init_db", "root"]
