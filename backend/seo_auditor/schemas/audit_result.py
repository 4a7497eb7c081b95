"""
Pydantic schemas for audit and remediation responses.
"""

from typing import Literal
from pydantic import BaseModel, Field


Status = Literal["done", "missing", "partial", "not_applicable"]


class ItemResult(BaseModel):
    """Outcome of a single checklist check."""
    check: str
    priority: str
    status: Status
    details: str = ""
    how_to_fix: str = ""


class SectionResult(BaseModel):
    """Roll-up for one checklist section."""
    label: str
    total: int
    passed: int
    failed: int  # missing + partial
    items: dict[str, ItemResult] = {}


class PriorityFix(BaseModel):
    """Queued fix for a check that is neither done nor not applicable."""
    check_id: str
    check: str
    priority: str
    how_to_fix: str = ""
    section: str


class AuditResult(BaseModel):
    """Complete audit response."""
    url: str
    timestamp: str
    
    # Counters; failed counts missing items only
    total_checks: int
    passed: int
    failed: int
    partial: int
    not_applicable: int
    score_percentage: int = Field(..., ge=0, le=100)
    
    sections: dict[str, SectionResult] = {}
    priority_fixes: list[PriorityFix] = []
    
    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com",
                "timestamp": "2024-01-01T12:00:00+00:00",
                "total_checks": 4,
                "passed": 2,
                "failed": 1,
                "partial": 0,
                "not_applicable": 1,
                "score_percentage": 67,
                "sections": {},
                "priority_fixes": [
                    {
                        "check_id": "1_03_robots_txt",
                        "check": "robots.txt",
                        "priority": "critical",
                        "how_to_fix": "Publish a robots.txt at the site root",
                        "section": "Technical SEO"
                    }
                ]
            }
        }


class RemediationOutcome(BaseModel):
    """Result of one remediation run against one document."""
    original_size: int
    fixed_size: int
    changes: list[str] = []
