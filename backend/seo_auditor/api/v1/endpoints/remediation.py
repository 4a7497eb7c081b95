"""
Remediation API endpoint.
"""
from fastapi import APIRouter, HTTPException

from seo_auditor.config import settings
from seo_auditor.exceptions import DocumentNotFound, DocumentOutsideRoot
from seo_auditor.logger import logger
from seo_auditor.schemas.audit_request import RemediationRequest
from seo_auditor.services.remediation.engine import RemediationEngine

router = APIRouter(tags=["Remediation"])


@router.post("")
def fix_issues(request: RemediationRequest):
    """Apply safe fixes for the selected issues to an HTML file on disk."""
    # Plain def: file I/O runs in FastAPI's threadpool
    engine = RemediationEngine(root=settings.REMEDIATION_ROOT or None)
    try:
        outcome = engine.remediate(request.file_path, request.issues, request.context)
    except DocumentOutsideRoot as e:
        logger.warning(f"Remediation refused: {e}")
        raise HTTPException(status_code=403, detail=str(e))
    except DocumentNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    
    return {
        "status": "success",
        "file": request.file_path,
        **outcome.model_dump()
    }
