"""
Evaluator registry - Fixed evaluation order for the scoring engine.

Order matters: the priority-fix queue is stably sorted, so fixes of equal
priority keep this family order.
"""
from seo_auditor.services.evaluators.accessibility import AccessibilityEvaluator
from seo_auditor.services.evaluators.base import Evaluator
from seo_auditor.services.evaluators.legal import LegalEvaluator
from seo_auditor.services.evaluators.on_page import OnPageEvaluator
from seo_auditor.services.evaluators.performance import PerformanceEvaluator
from seo_auditor.services.evaluators.schema import SchemaEvaluator
from seo_auditor.services.evaluators.security import SecurityEvaluator
from seo_auditor.services.evaluators.social import SocialEvaluator
from seo_auditor.services.evaluators.technical import TechnicalEvaluator
from seo_auditor.services.evaluators.ux import UxEvaluator

DEFAULT_EVALUATORS: tuple[Evaluator, ...] = (
    TechnicalEvaluator(),
    OnPageEvaluator(),
    SchemaEvaluator(),
    SocialEvaluator(),
    PerformanceEvaluator(),
    SecurityEvaluator(),
    UxEvaluator(),
    AccessibilityEvaluator(),
    LegalEvaluator(),
)
