"""
Health check endpoint.
"""

from fastapi import APIRouter

from ai_ready.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Health check with the optional collaborators' configuration state."""
    return {
        "status": "ok",
        "firecrawl_configured": bool(settings.FIRECRAWL_API_KEY),
        "gemini_configured": bool(settings.GOOGLE_API_KEY),
        "gemini_model": settings.GEMINI_MODEL,
    }
