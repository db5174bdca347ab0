"""FastAPI main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from teamboard.core.config import settings
from teamboard.core.middleware import setup_middleware
from teamboard.core.rate_limiter import limiter
from teamboard.core.exceptions import TeamboardError
from teamboard.db.session import init_db

from teamboard.api.auth import router as auth_router
from teamboard.api.users import router as users_router
from teamboard.api.projects import router as projects_router
from teamboard.api.teams import router as teams_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("teamboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Teamboard API")
    if settings.AUTO_CREATE_TABLES:
        try:
            init_db()
            logger.info("Database tables ready")
        except Exception as e:
            logger.warning(f"Database not available: {e}")

    yield

    logger.info("Shutting down Teamboard API")


app = FastAPI(
    title="Teamboard API",
    description="Users, teams and projects",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Middleware
setup_middleware(app)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(TeamboardError)
async def teamboard_exception_handler(request: Request, exc: TeamboardError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"},
    )


# Register routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(projects_router)
app.include_router(teams_router)


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Quick health check endpoint."""
    return {"status": "ok"}
