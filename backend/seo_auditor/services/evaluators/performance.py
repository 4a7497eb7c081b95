"""
Performance - Compression and resource-hint markers.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator


class PerformanceEvaluator(Evaluator):
    """Static hints only; nothing is rendered or timed."""
    
    section_id = "7_performance_core_web_vitals"
    label = "Performance & Core Web Vitals"
    DEFAULTS = {
        "7_01_gzip_compression": CheckDefinition("GZIP compression", "critical", "Enable gzip or brotli compression on the server"),
        "7_07_preload_lcp": CheckDefinition("Preload LCP", "high", 'Preload the LCP image with <link rel="preload">'),
        "7_08_preconnect": CheckDefinition("Preconnect", "medium", 'Add <link rel="preconnect"> for third-party origins'),
        "7_09_defer_js": CheckDefinition("Defer JS", "high", "Load non-critical scripts with defer or async"),
        "7_11_font_optimization": CheckDefinition("Font swap", "medium", "Use font-display: swap for web fonts"),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        results = {}
        
        encoding = artifacts.headers.get("content-encoding", "")
        compressed = "gzip" in encoding or "br" in encoding
        results["7_01_gzip_compression"] = self.result(
            checklist, "7_01_gzip_compression", "done" if compressed else "missing",
            f"Encoding: {encoding}" if encoding else "No compression detected"
        )
        
        results["7_07_preload_lcp"] = self.marker(
            checklist, "7_07_preload_lcp", markup.has_pattern(html, r"rel=[\"']preload[\"']"),
            "Preload hints found", "No preload hints"
        )
        results["7_08_preconnect"] = self.marker(
            checklist, "7_08_preconnect", markup.has_pattern(html, r"rel=[\"']preconnect[\"']"),
            "Preconnect hints found", "No preconnect hints"
        )
        
        deferred = markup.has_pattern(html, r"\bdefer\b") or markup.has_pattern(html, r"\basync\b")
        results["7_09_defer_js"] = self.marker(
            checklist, "7_09_defer_js", deferred,
            "Deferred/async scripts found", "No deferred scripts"
        )
        
        font_swap = markup.has_pattern(html, r"display=swap") or markup.has_pattern(html, r"font-display:\s*swap")
        results["7_11_font_optimization"] = self.marker(
            checklist, "7_11_font_optimization", font_swap,
            "font-display:swap found", "No font-display:swap"
        )
        
        return results
