"""
Open Graph & Social - og:* and twitter:* meta tags.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator

# (check_id, meta name/property, label)
SOCIAL_CHECKS = [
    ("4_01_og_type", "og:type", "og:type"),
    ("4_02_og_title", "og:title", "og:title"),
    ("4_03_og_description", "og:description", "og:description"),
    ("4_04_og_image", "og:image", "og:image"),
    ("4_05_og_url", "og:url", "og:url"),
    ("4_08_twitter_card", "twitter:card", "Twitter card"),
]


class SocialEvaluator(Evaluator):
    """Social preview tags."""
    
    section_id = "4_open_graph_social"
    label = "Open Graph & Social"
    DEFAULTS = {
        check_id: CheckDefinition(label, "high", f'Add <meta property="{name}" content="...">')
        for check_id, name, label in SOCIAL_CHECKS
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        results = {}
        for check_id, name, label in SOCIAL_CHECKS:
            value = markup.extract_meta(artifacts.html, name)
            results[check_id] = self.marker(
                checklist, check_id, bool(value),
                f"{label}: {(value or '')[:80]}", f"No {label} tag"
            )
        return results
