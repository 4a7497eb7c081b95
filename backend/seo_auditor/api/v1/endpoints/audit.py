"""
Audit API endpoint.
"""
from fastapi import APIRouter, HTTPException

from seo_auditor.exceptions import FetchFailure
from seo_auditor.logger import logger
from seo_auditor.schemas.audit_request import AuditRequest
from seo_auditor.schemas.audit_result import AuditResult
from seo_auditor.services.audit_runner import AuditRunner

router = APIRouter(tags=["Audit"])


@router.post("", response_model=AuditResult)
async def run_audit(request: AuditRequest):
    """Fetch a page and audit it against the checklist."""
    runner = AuditRunner()
    try:
        return await runner.run(request.url)
    except FetchFailure as e:
        logger.warning(f"Audit aborted: {e}")
        raise HTTPException(status_code=502, detail=str(e))
