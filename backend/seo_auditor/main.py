"""
SEO Checklist Auditor - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seo_auditor.config import settings
from seo_auditor.api.v1.endpoints import audit, health, remediation
from seo_auditor.logger import logger
from seo_auditor.services.checklist_store import get_checklist

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Checklist-driven SEO audit with priority fixes and safe HTML remediation",
    version="1.0.0",
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
app.include_router(audit.router, prefix="/api/v1/audit")
app.include_router(remediation.router, prefix="/api/v1/remediate")


@app.on_event("startup")
async def startup():
    """Load the checklist once at startup."""
    logger.info(f"Starting {settings.APP_NAME}...")
    checklist = get_checklist()
    logger.info(f"Checklist ready ({len(checklist.sections)} sections)")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
