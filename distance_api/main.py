"""FastAPI application entry point - Serverless-optimized for Vercel."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from distance_api.config import load_settings
from distance_api.middleware.rate_limit import RateLimitMiddleware
from distance_api.routes import distance

SERVICE_NAME = "pmconnect-distance"
VERSION = "0.1.0"

settings = load_settings()

# Create app
app = FastAPI(
    title="PM Connect Distance API",
    description="Driving distance from an origin to the PM Connect office",
    version=VERSION,
)
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(RateLimitMiddleware, settings=settings)

app.include_router(distance.router, prefix="/api", tags=["distance"])


@app.get("/api")
async def root():
    """API status endpoint."""
    return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}


@app.get("/api/health")
async def health():
    """Health check for load balancers."""
    current = app.state.settings
    return {
        "status": "healthy",
        "maps_configured": current.maps_configured,
        "destination": current.destination,
    }


# Vercel will auto-detect the `app` export for FastAPI
