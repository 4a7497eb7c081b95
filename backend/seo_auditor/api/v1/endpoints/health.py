"""
Health check endpoint.
"""

from fastapi import APIRouter
from seo_auditor.services.checklist_store import get_checklist

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with checklist status."""
    checklist = get_checklist()
    
    return {
        "status": "ok",
        "checklist": {
            "loaded": not checklist.is_empty,
            "source": checklist.source,
            "sections": len(checklist.sections)
        }
    }
