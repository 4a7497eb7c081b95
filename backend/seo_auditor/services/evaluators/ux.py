"""
UX & CRO - Conversion and contact markers.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator


class UxEvaluator(Evaluator):
    """Calls to action and ways to get in touch."""
    
    section_id = "11_ux_cro"
    label = "UX & Conversion"
    DEFAULTS = {
        "11_01_cta_visibility": CheckDefinition("CTA visibility", "critical", "Add a prominent call-to-action button above the fold"),
        "11_03_contact_form": CheckDefinition("Contact form", "high", "Add a short contact form"),
        "11_04_phone_clickable": CheckDefinition("Clickable phone", "high", "Wrap phone numbers in tel: links"),
        "11_05_whatsapp_button": CheckDefinition("WhatsApp button", "medium", "Add a wa.me chat link"),
        "11_09_cookie_consent": CheckDefinition("Cookie consent", "medium", "Show a cookie consent banner"),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        results = {}
        
        results["11_01_cta_visibility"] = self.marker(
            checklist, "11_01_cta_visibility", markup.has_pattern(html, r"class=[\"'][^\"']*btn[^\"']*[\"']"),
            "CTA buttons found", "No CTA buttons detected"
        )
        results["11_04_phone_clickable"] = self.marker(
            checklist, "11_04_phone_clickable", markup.has_pattern(html, r"href=[\"']tel:"),
            "Clickable phone link found", "No tel: link"
        )
        
        whatsapp = markup.has_pattern(html, r"wa\.me") or markup.has_pattern(html, r"whatsapp")
        results["11_05_whatsapp_button"] = self.marker(
            checklist, "11_05_whatsapp_button", whatsapp,
            "WhatsApp integration found", "No WhatsApp button"
        )
        results["11_03_contact_form"] = self.marker(
            checklist, "11_03_contact_form", markup.has_pattern(html, r"<form\s"),
            "Contact form found", "No contact form"
        )
        
        consent = markup.has_pattern(html, r"cookie") and markup.has_pattern(html, r"accept|consent")
        results["11_09_cookie_consent"] = self.marker(
            checklist, "11_09_cookie_consent", consent,
            "Cookie consent found", "No cookie consent banner"
        )
        
        return results
