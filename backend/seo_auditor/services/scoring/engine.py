"""
Scoring Engine - Fold evaluator outputs into one audit report.

Coordinates:
- Evaluator calls, in registry order
- Section roll-ups
- Global counters and compliance score
- Priority-ordered fix queue
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from seo_auditor.logger import logger
from seo_auditor.schemas.audit_result import AuditResult, PriorityFix, SectionResult
from seo_auditor.services.checklist_store import Checklist
from seo_auditor.services.evaluators.base import Artifacts, Evaluator
from seo_auditor.services.evaluators.registry import DEFAULT_EVALUATORS
from seo_auditor.services.scoring.priorities import priority_rank


def score_percentage(passed: int, total_checks: int, not_applicable: int) -> int:
    """passed / applicable as a whole percentage, halves rounded up; 0 when nothing applies."""
    applicable = total_checks - not_applicable
    if applicable <= 0:
        return 0
    # Integer half-up rounding, so 12.5 -> 13
    return (passed * 200 + applicable) // (2 * applicable)


class ScoringEngine:
    """Main aggregation orchestrator."""
    
    def __init__(self, evaluators: Optional[Iterable[Evaluator]] = None):
        self.evaluators = tuple(evaluators) if evaluators is not None else DEFAULT_EVALUATORS
    
    def aggregate(
        self,
        artifacts: Artifacts,
        checklist: Checklist,
        timestamp: Optional[str] = None
    ) -> AuditResult:
        """Run every evaluator and combine the results.
        
        Args:
            artifacts: Fetched page, headers and auxiliary files
            checklist: Display metadata for checks and sections
            timestamp: Report time; defaults to now (UTC)
            
        Returns:
            AuditResult with section roll-ups and the sorted fix queue
        """
        total_checks = passed = failed = partial = not_applicable = 0
        sections: dict[str, SectionResult] = {}
        fixes: list[PriorityFix] = []
        
        for evaluator in self.evaluators:
            items = evaluator.evaluate(artifacts, checklist)
            section_label = evaluator.section_label(checklist)
            section_passed = section_failed = 0
            
            for check_id, item in items.items():
                total_checks += 1
                
                if item.status == "done":
                    passed += 1
                    section_passed += 1
                elif item.status == "partial":
                    # Own global bucket, but a failure at section level
                    partial += 1
                    section_failed += 1
                elif item.status == "not_applicable":
                    not_applicable += 1
                else:
                    failed += 1
                    section_failed += 1
                
                if item.status not in ("done", "not_applicable"):
                    fixes.append(PriorityFix(
                        check_id=check_id,
                        check=item.check,
                        priority=item.priority,
                        how_to_fix=item.how_to_fix,
                        section=section_label
                    ))
            
            sections[evaluator.section_id] = SectionResult(
                label=section_label,
                total=len(items),
                passed=section_passed,
                failed=section_failed,
                items=items
            )
        
        # sorted() is stable: equal priorities keep discovery order
        fixes = sorted(fixes, key=lambda fix: priority_rank(fix.priority))
        
        score = score_percentage(passed, total_checks, not_applicable)
        
        logger.info(
            f"Audit of {artifacts.url}: {passed}/{total_checks} passed, "
            f"{failed} missing, {partial} partial, {not_applicable} n/a, score={score}%"
        )
        
        return AuditResult(
            url=artifacts.url,
            timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
            total_checks=total_checks,
            passed=passed,
            failed=failed,
            partial=partial,
            not_applicable=not_applicable,
            score_percentage=score,
            sections=sections,
            priority_fixes=fixes
        )
