"""
Legal - Privacy, terms and copyright notices.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator


class LegalEvaluator(Evaluator):
    
    section_id = "16_legal_compliance"
    label = "Legal & Compliance"
    DEFAULTS = {
        "16_01_privacy_policy": CheckDefinition("Privacy Policy", "critical", "Link a privacy policy from the footer"),
        "16_02_terms_of_service": CheckDefinition("Terms of Service", "high", "Link terms of service from the footer"),
        "16_04_copyright_notice": CheckDefinition("Copyright", "medium", "Add a copyright notice to the footer"),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        return {
            "16_01_privacy_policy": self.marker(
                checklist, "16_01_privacy_policy", markup.has_pattern(html, r"privacy.?policy"),
                "Privacy policy link found", "No privacy policy link"
            ),
            "16_02_terms_of_service": self.marker(
                checklist, "16_02_terms_of_service",
                markup.has_pattern(html, r"terms.?(of|&).?service|terms.?conditions"),
                "Terms link found", "No terms link"
            ),
            "16_04_copyright_notice": self.marker(
                checklist, "16_04_copyright_notice", markup.has_pattern(html, r"©|&copy;|copyright"),
                "Copyright notice found", "No copyright notice"
            ),
        }
