"""
Security - HTTP response security headers.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators.base import Artifacts, Evaluator

# (check_id, header name, label)
HEADER_CHECKS = [
    ("8_01_hsts", "strict-transport-security", "HSTS"),
    ("8_02_x_content_type", "x-content-type-options", "X-Content-Type-Options"),
    ("8_03_x_frame_options", "x-frame-options", "X-Frame-Options"),
    ("8_04_xss_protection", "x-xss-protection", "X-XSS-Protection"),
    ("8_05_referrer_policy", "referrer-policy", "Referrer-Policy"),
    ("8_07_csp", "content-security-policy", "CSP"),
]


class SecurityEvaluator(Evaluator):
    """Header presence only; values are reported, not validated."""
    
    section_id = "8_security"
    label = "Security"
    DEFAULTS = {
        check_id: CheckDefinition(label, "high", f"Send the {header} response header")
        for check_id, header, label in HEADER_CHECKS
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        results = {}
        for check_id, header, label in HEADER_CHECKS:
            value = artifacts.headers.get(header)
            results[check_id] = self.marker(
                checklist, check_id, bool(value),
                f"{label}: {(value or '')[:80]}", f"No {label} header"
            )
        return results
