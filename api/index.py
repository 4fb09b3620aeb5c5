"""
Kira Shop - Main FastAPI Application

Single entry point for the storefront API (auth, catalog, orders, admin).
"""
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv()

from core.config import get_cors_origins  # noqa: E402
from core.errors import ERROR_INTERNAL  # noqa: E402
from core.logging import get_logger  # noqa: E402
from core.routers import (  # noqa: E402
    admin_router,
    auth_router,
    contact_router,
    orders_router,
    products_router,
    profile_router,
)
from core.services.database import init_database  # noqa: E402

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    await init_database()
    yield


app = FastAPI(
    title="Kira Shop",
    description="Storefront API: accounts, catalog, orders and admin dashboard",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": ERROR_INTERNAL})


for router in (
    auth_router,
    profile_router,
    products_router,
    orders_router,
    contact_router,
    admin_router,
):
    app.include_router(router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "kira-shop"}
