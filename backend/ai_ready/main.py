"""
AI Readiness Scanner - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ai_ready.config import settings
from ai_ready.api.v1.endpoints import health, insights, readiness
from ai_ready.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Heuristic AI readiness scoring with optional generative insights",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(readiness.router, prefix="/api/v1")
app.include_router(insights.router, prefix="/api/v1")

logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
