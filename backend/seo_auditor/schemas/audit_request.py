"""
Pydantic schemas for audit and remediation requests.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AuditRequest(BaseModel):
    """Request to run a checklist audit."""
    url: str = Field(..., description="URL or bare host to audit")
    
    class Config:
        json_schema_extra = {
            "example": {
                "url": "example.com"
            }
        }


class RemediationIssue(BaseModel):
    """One issue selected from a prior audit."""
    check_id: str = Field(..., description="Check ID from the audit (e.g. 2_01_title_tag)")
    fix_instruction: str = Field("", description="Text to insert, or empty for the default")


class RemediationContext(BaseModel):
    """Site details used to build default fixes."""
    site_id: Optional[str] = Field(None, description="Domain used for canonical and og:url")
    display_name: Optional[str] = Field(None, description="Business name used in titles")


class RemediationRequest(BaseModel):
    """Request to patch a stored HTML document."""
    file_path: str = Field(..., description="Path to the HTML document to fix")
    issues: list[RemediationIssue]
    context: Optional[RemediationContext] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "file_path": "/srv/site/index.html",
                "issues": [{"check_id": "2_01_title_tag", "fix_instruction": ""}],
                "context": {"site_id": "example.com", "display_name": "Example Co"}
            }
        }
