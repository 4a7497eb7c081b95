"""Unit tests for the ScoringEngine aggregation and the fix queue."""

from __future__ import annotations

import pytest

from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import Checklist
from seo_auditor.services.evaluators.base import Artifacts, Evaluator
from seo_auditor.services.scoring.engine import ScoringEngine, score_percentage
from seo_auditor.services.scoring.priorities import priority_rank


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FixedEvaluator(Evaluator):
    """Returns a canned mapping of check-id -> (status, priority)."""

    def __init__(self, section_id: str, label: str, items: dict[str, tuple[str, str]]):
        self.section_id = section_id
        self.label = label
        self.items = items

    def evaluate(self, artifacts, checklist):
        return {
            check_id: ItemResult(check=check_id, priority=priority, status=status)
            for check_id, (status, priority) in self.items.items()
        }


def _aggregate(*evaluators, checklist=None):
    engine = ScoringEngine(evaluators)
    artifacts = Artifacts(url="https://acme.example/", html="")
    return engine.aggregate(artifacts, checklist or Checklist.empty(), timestamp="2024-01-01T00:00:00+00:00")


# ---------------------------------------------------------------------------
# Score
# ---------------------------------------------------------------------------


class TestScorePercentage:

    @pytest.mark.parametrize(
        "passed,total,na,expected",
        [(0, 0, 0, 0), (0, 4, 4, 0), (1, 8, 0, 13), (1, 3, 0, 33), (2, 3, 0, 67), (5, 5, 0, 100), (3, 5, 1, 75)],
    )
    def test_values(self, passed, total, na, expected):
        assert score_percentage(passed, total, na) == expected


class TestPriorityRank:

    def test_known_levels(self):
        assert [priority_rank(p) for p in ("critical", "high", "medium", "low")] == [0, 1, 2, 3]

    def test_unknown_ranks_as_low(self):
        assert priority_rank("urgent") == priority_rank("low")
        assert priority_rank("") == 3


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


class TestAggregation:

    def test_counters_partition_total(self):
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {"a1": ("done", "high"), "a2": ("missing", "high"), "a3": ("partial", "low")}),
            _FixedEvaluator("2_b", "B", {"b1": ("not_applicable", "high"), "b2": ("done", "medium")}),
        )
        assert result.total_checks == 5
        assert (result.passed, result.failed, result.partial, result.not_applicable) == (2, 1, 1, 1)
        assert result.total_checks == result.passed + result.failed + result.partial + result.not_applicable
        assert result.score_percentage == 50

    def test_partial_counts_as_section_failure(self):
        """Global partial is its own bucket; the section tally folds it into failed."""
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {"a1": ("partial", "high"), "a2": ("missing", "high"), "a3": ("done", "high")}),
        )
        section = result.sections["1_a"]
        assert (section.total, section.passed, section.failed) == (3, 1, 2)
        assert (result.failed, result.partial) == (1, 1)

    def test_everything_not_applicable_scores_zero(self):
        result = _aggregate(_FixedEvaluator("1_a", "A", {"a1": ("not_applicable", "high")}))
        assert result.total_checks == result.not_applicable == 1
        assert result.score_percentage == 0
        assert result.priority_fixes == []

    def test_section_label_from_checklist(self):
        checklist = Checklist.from_dict({"1_a": {"label": "Alpha", "items": {}}})
        result = _aggregate(_FixedEvaluator("1_a", "A", {"a1": ("missing", "high")}), checklist=checklist)
        assert result.sections["1_a"].label == "Alpha"
        assert result.priority_fixes[0].section == "Alpha"

    def test_identical_inputs_identical_results(self, full_artifacts, empty_checklist):
        engine = ScoringEngine()
        first = engine.aggregate(full_artifacts, empty_checklist, timestamp="t")
        second = engine.aggregate(full_artifacts, empty_checklist, timestamp="t")
        assert first == second

    def test_default_timestamp_is_set(self, bare_artifacts, empty_checklist):
        result = ScoringEngine().aggregate(bare_artifacts, empty_checklist)
        assert result.timestamp.endswith("+00:00")


class TestPriorityFixes:

    def test_only_failing_items_are_queued(self):
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {
                "a1": ("done", "critical"),
                "a2": ("not_applicable", "critical"),
                "a3": ("missing", "low"),
                "a4": ("partial", "high"),
            }),
        )
        assert [f.check_id for f in result.priority_fixes] == ["a4", "a3"]

    def test_sort_is_stable_across_sections(self):
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {"a1": ("missing", "medium"), "a2": ("missing", "critical")}),
            _FixedEvaluator("2_b", "B", {"b1": ("missing", "critical"), "b2": ("partial", "medium")}),
            _FixedEvaluator("3_c", "C", {"c1": ("missing", "critical")}),
        )
        assert [f.check_id for f in result.priority_fixes] == ["a2", "b1", "c1", "a1", "b2"]
        assert [f.section for f in result.priority_fixes] == ["A", "B", "C", "A", "B"]

    def test_critical_sorts_first(self):
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {"a1": ("missing", "low"), "a2": ("missing", "critical")}),
        )
        assert [f.priority for f in result.priority_fixes] == ["critical", "low"]

    def test_unknown_priority_sorts_with_low(self):
        result = _aggregate(
            _FixedEvaluator("1_a", "A", {
                "a1": ("missing", "someday"),
                "a2": ("missing", "low"),
                "a3": ("missing", "medium"),
            }),
        )
        assert [f.check_id for f in result.priority_fixes] == ["a3", "a1", "a2"]

    def test_queue_is_non_decreasing(self, bare_artifacts, empty_checklist):
        result = ScoringEngine().aggregate(bare_artifacts, empty_checklist)
        ranks = [priority_rank(f.priority) for f in result.priority_fixes]
        assert ranks == sorted(ranks)


# ---------------------------------------------------------------------------
# Full evaluator set
# ---------------------------------------------------------------------------


class TestDefaultEvaluators:

    def test_full_page_scores_100(self, full_artifacts, empty_checklist):
        result = ScoringEngine().aggregate(full_artifacts, empty_checklist)
        assert result.total_checks == 50
        assert result.passed == 50
        assert result.score_percentage == 100
        assert result.priority_fixes == []

    def test_bare_page(self, bare_artifacts, empty_checklist):
        result = ScoringEngine().aggregate(bare_artifacts, empty_checklist)
        assert (result.total_checks, result.passed, result.failed, result.partial, result.not_applicable) == (
            50, 0, 45, 1, 4
        )
        assert result.score_percentage == 0
        assert len(result.priority_fixes) == 46
        queued = {f.check_id for f in result.priority_fixes}
        assert "2_07_image_alt_tags" not in queued
        assert "15_04_form_labels" not in queued
        assert list(result.sections) == [
            "1_technical_seo", "2_on_page_seo", "3_structured_data_schema", "4_open_graph_social",
            "7_performance_core_web_vitals", "8_security", "11_ux_cro", "15_accessibility",
            "16_legal_compliance",
        ]

    def test_image_without_alt_is_queued_as_critical(self, empty_checklist):
        artifacts = Artifacts(url="https://a.example/", html='<html><body><img src="x.png"></body></html>')
        result = ScoringEngine().aggregate(artifacts, empty_checklist)
        fix = next(f for f in result.priority_fixes if f.check_id == "2_07_image_alt_tags")
        assert fix.priority == "critical"
        assert fix.section == "On-Page SEO"
