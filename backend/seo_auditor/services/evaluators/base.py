"""
Evaluator base - Shared artifact container and result building.

Each concern family subclasses Evaluator, declares its section id, default
section label and built-in check metadata, and implements ``evaluate``.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

from seo_auditor.schemas.audit_result import ItemResult, Status
from seo_auditor.services.checklist_store import CheckDefinition, Checklist


@dataclass
class Artifacts:
    """Already-fetched inputs for one audit."""
    url: str
    html: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    robots_txt: Optional[str] = None
    sitemap_xml: Optional[str] = None

    def __post_init__(self):
        # Case-insensitive header lookups regardless of what the caller passed
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers or {})

    @property
    def is_https(self) -> bool:
        return self.url.lower().startswith("https://")


class Evaluator:
    """One concern family of checklist checks."""

    section_id: str = ""
    label: str = ""
    DEFAULTS: Mapping[str, CheckDefinition] = {}

    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        """Return check-id -> ItemResult for this family. Must not raise."""
        raise NotImplementedError

    def section_label(self, checklist: Checklist) -> str:
        return checklist.section_label(self.section_id) or self.label or self.section_id

    def definition(self, checklist: Checklist, check_id: str) -> CheckDefinition:
        """Checklist metadata for a check, filled in from the built-in defaults."""
        default = self.DEFAULTS.get(check_id) or CheckDefinition(label=check_id)
        configured = checklist.item(self.section_id, check_id)
        if configured is None:
            return default
        return CheckDefinition(
            label=configured.label or default.label,
            priority=configured.priority or default.priority,
            how_to_fix=configured.how_to_fix or default.how_to_fix,
        )

    def result(self, checklist: Checklist, check_id: str, status: Status, details: str) -> ItemResult:
        definition = self.definition(checklist, check_id)
        return ItemResult(
            check=definition.label,
            priority=definition.priority,
            status=status,
            details=details,
            how_to_fix=definition.how_to_fix,
        )

    def marker(self, checklist: Checklist, check_id: str, found: bool, found_msg: str, missing_msg: str) -> ItemResult:
        """Binary check: done when the marker is present, missing otherwise."""
        if found:
            return self.result(checklist, check_id, "done", found_msg)
        return self.result(checklist, check_id, "missing", missing_msg)


def length_status(value: Optional[str], low: int, high: int) -> Status:
    """done inside [low, high], partial when present but out of range, missing when absent."""
    if not value:
        return "missing"
    return "done" if low <= len(value) <= high else "partial"


def count_status(matching: int, total: int) -> Status:
    """not_applicable with nothing to count, then done / partial / missing by coverage."""
    if total == 0:
        return "not_applicable"
    if matching >= total:
        return "done"
    if matching > 0:
        return "partial"
    return "missing"
