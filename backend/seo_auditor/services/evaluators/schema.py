"""
Structured Data - JSON-LD schema.org type markers.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator

# (check_id, schema.org type)
SCHEMA_CHECKS = [
    ("3_01_organization_schema", "Organization"),
    ("3_02_local_business_schema", "LocalBusiness"),
    ("3_03_breadcrumb_schema", "BreadcrumbList"),
    ("3_04_faq_schema", "FAQPage"),
    ("3_05_article_schema", "Article"),
    ("3_10_speakable_schema", "SpeakableSpecification"),
]


class SchemaEvaluator(Evaluator):
    """Presence of each expected schema.org type."""
    
    section_id = "3_structured_data_schema"
    label = "Structured Data (Schema)"
    DEFAULTS = {
        check_id: CheckDefinition(f"{schema_type} schema", "high", f"Add {schema_type} JSON-LD markup")
        for check_id, schema_type in SCHEMA_CHECKS
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        results = {}
        for check_id, schema_type in SCHEMA_CHECKS:
            results[check_id] = self.marker(
                checklist, check_id, markup.has_schema_type(artifacts.html, schema_type),
                f"{schema_type} schema found", f"No {schema_type} schema"
            )
        return results
