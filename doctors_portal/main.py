import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from doctors_portal.api.routes import appointment_options, auth, bookings, doctors, payments, users
from doctors_portal.core.config import _ENV_FILE, settings
from doctors_portal.core.db import create_engine, create_session_maker, init_db
from doctors_portal.repositories import Repositories
from doctors_portal.services.payment_service import PaymentReconciliationError

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)

_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
_ALLOW_HEADERS = ["Authorization", "Content-Type"]


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ", ".join(_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(_ALLOW_HEADERS),
    }
    if origin and origin in settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = origin
    elif settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = settings.cors_origins_list[0]
    return headers


async def store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store operation failed: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Storage operation failed"},
        headers=_cors_headers(request.headers.get("origin")),
    )


async def payment_reconciliation_handler(request: Request, exc: PaymentReconciliationError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "payment_id": exc.payment_id, "booking_id": exc.booking_id},
        headers=_cors_headers(request.headers.get("origin")),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return actual error in JSON; include CORS so 500 responses are not blocked by browser."""
    headers = _cors_headers(request.headers.get("origin"))
    logger.exception("Unhandled exception: %s", exc)
    detail = f"{type(exc).__name__}: {str(exc)}"
    return JSONResponse(
        status_code=500,
        content={"detail": detail},
        headers=headers,
    )


def _log_startup() -> None:
    logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
    if settings.payments_enabled:
        logger.info("Payments: configured (currency %s)", settings.payment_currency)
    else:
        logger.warning(
            "Payments: NOT configured. Set STRIPE_SECRET_KEY in %s",
            _ENV_FILE,
        )


def create_app(repositories: Repositories | None = None) -> FastAPI:
    """Build the API around a set of repositories.

    Without repositories an engine is created from DATABASE_URL; the app then owns
    it and disposes it on shutdown.
    """
    engine = None
    if repositories is None:
        engine = create_engine()
        repositories = Repositories.from_session_maker(create_session_maker(engine))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_startup()
        if engine is not None and settings.auto_create_tables:
            await init_db(engine)
            logger.info("Tables created (AUTO_CREATE_TABLES)")
        yield
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="Doctors Portal API",
        description="Backend for Doctors Portal: appointment options, bookings, users, doctors, payments",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.repositories = repositories

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=_ALLOW_METHODS,
        allow_headers=_ALLOW_HEADERS,
    )

    app.include_router(appointment_options.router)
    app.include_router(bookings.router)
    app.include_router(users.router)
    app.include_router(doctors.router)
    app.include_router(payments.router)
    app.include_router(auth.router)

    app.add_exception_handler(SQLAlchemyError, store_failure_handler)
    app.add_exception_handler(PaymentReconciliationError, payment_reconciliation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/")
    async def root() -> dict:
        return {"message": "Doctors Portal Server"}

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
