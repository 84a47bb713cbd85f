# storefront/main.py
import time
import uuid
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from storefront import models  # noqa: F401  (registreert SQLAlchemy modellen)
from storefront.config import settings
from storefront.core.logging_config import logger, setup_logging
from storefront.core.rate_limit import limiter
from storefront.db import Base, engine
from storefront.observability.metrics import router as metrics_router
from storefront.routers import admin, checkout, locale, shipping

setup_logging()

if settings.sentry_dsn:
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.app_env,
        integrations=[FastApiIntegration()],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("startup", service=settings.service_name, env=settings.app_env)
    yield


# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title="Storefront", version="0.1.0", lifespan=lifespan)


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    client_ip = request.client.host if request.client else "unknown"

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    bound_logger = logger.bind(
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    response.headers["X-Request-ID"] = request_id
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RateLimitExceeded)
def ratelimit_handler(request: Request, exc: RateLimitExceeded):
    return PlainTextResponse(str(exc), status_code=429)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(shipping.router)
app.include_router(checkout.router)
app.include_router(locale.router)
app.include_router(admin.router)
app.include_router(metrics_router)  # /metrics
