# fleet_api/main.py
"""
FastAPI application entry point.
Owns the Store lifecycle, error handlers, and all routers.
Run with: uvicorn fleet_api.main:app --host 0.0.0.0 --port 8080
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fleet_api.config import settings
from fleet_api.database import Store
from fleet_api.errors import FleetError
from fleet_api.routers import brands, drivers, health, usage, vehicles
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Fleet API starting up...")
    store = Store(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    store.create_tables()
    app.state.store = store
    logger.info(f"✅ Database ready: {store.engine.url.render_as_string(hide_password=True)}")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")

    yield

    logger.info("🛑 Fleet API shutting down...")
    store.close()


app = FastAPI(
    title="Fleet API",
    description="Vehicles, drivers, brands and vehicle usage records.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    logger.warning(f"{request.method} {request.url.path} → {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
@app.get("/api", tags=["Health"], summary="Liveness ping")
async def ping():
    return {"ping": "pong"}


app.include_router(health.router,   prefix="/api", tags=["Health"])
app.include_router(brands.router,   prefix="/api", tags=["Brands"])
app.include_router(drivers.router,  prefix="/api", tags=["Drivers"])
app.include_router(vehicles.router, prefix="/api", tags=["Vehicles"])
app.include_router(usage.router,    prefix="/api", tags=["Usage"])
