"""
Accessibility - ARIA, semantic elements and form labels.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator


class AccessibilityEvaluator(Evaluator):
    
    section_id = "15_accessibility"
    label = "Accessibility"
    DEFAULTS = {
        "15_01_aria_labels": CheckDefinition("ARIA labels", "high", "Add aria-label to icon-only controls"),
        "15_04_form_labels": CheckDefinition("Form labels", "high", "Associate a <label> with every form field"),
        "15_06_semantic_html": CheckDefinition("Semantic HTML", "medium", "Use header, nav, main, section and footer elements"),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        results = {}
        
        results["15_01_aria_labels"] = self.marker(
            checklist, "15_01_aria_labels", markup.has_pattern(html, r"aria-label"),
            "ARIA labels found", "No ARIA labels detected"
        )
        results["15_06_semantic_html"] = self.marker(
            checklist, "15_06_semantic_html",
            markup.has_pattern(html, r"<(header|nav|main|section|article|footer)[\s>]"),
            "Semantic HTML5 elements found", "No semantic HTML5 elements"
        )
        
        if markup.has_pattern(html, r"<label\s"):
            results["15_04_form_labels"] = self.result(checklist, "15_04_form_labels", "done", "Form labels found")
        elif markup.has_pattern(html, r"<form"):
            results["15_04_form_labels"] = self.result(checklist, "15_04_form_labels", "missing", "Forms without labels")
        else:
            results["15_04_form_labels"] = self.result(checklist, "15_04_form_labels", "not_applicable", "No forms on page")
        
        return results
