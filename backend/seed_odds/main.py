"""
Playoff Seed Simulator - FastAPI Application

Main entry point for the web API.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import simulations_router
from .core.config import configure_logging, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    configure_logging(get_settings().log_level)
    yield


# Create FastAPI app
app = FastAPI(
    title="Playoff Seed Simulator",
    description="Monte Carlo simulation of playoff seed probabilities from weekly scoring projections.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(simulations_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Playoff Seed Simulator API",
        "version": __version__,
        "docs": "/api/docs",
        "health": "/api/health"
    }
