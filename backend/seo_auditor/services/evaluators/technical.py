"""
Technical SEO - Crawl and indexing markers.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator


class TechnicalEvaluator(Evaluator):
    """HTTPS, robots.txt, sitemap and head-level crawl directives."""
    
    section_id = "1_technical_seo"
    label = "Technical SEO"
    DEFAULTS = {
        "1_01_https": CheckDefinition("HTTPS", "critical", "Serve the site over HTTPS and redirect HTTP to HTTPS"),
        "1_03_robots_txt": CheckDefinition("robots.txt", "critical", "Publish a robots.txt at the site root"),
        "1_04_sitemap_xml": CheckDefinition("sitemap.xml", "critical", "Publish sitemap.xml and reference it from robots.txt"),
        "1_06_canonical_tags": CheckDefinition("Canonical tag", "critical", 'Add <link rel="canonical"> pointing at the preferred URL'),
        "1_07_meta_robots": CheckDefinition("Meta robots", "high", 'Add <meta name="robots" content="index, follow">'),
        "1_13_viewport_meta": CheckDefinition("Viewport meta", "critical", "Add a responsive viewport meta tag"),
        "1_14_charset": CheckDefinition("Charset UTF-8", "high", 'Declare <meta charset="UTF-8"> first in <head>'),
        "1_15_lang_attribute": CheckDefinition("Lang attribute", "medium", "Set the lang attribute on <html>"),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        results = {}
        
        results["1_01_https"] = self.marker(
            checklist, "1_01_https", artifacts.is_https,
            "Site uses HTTPS", "Site does not use HTTPS"
        )
        results["1_03_robots_txt"] = self.marker(
            checklist, "1_03_robots_txt", bool(artifacts.robots_txt),
            "robots.txt found", "robots.txt not found"
        )
        results["1_04_sitemap_xml"] = self.marker(
            checklist, "1_04_sitemap_xml", bool(artifacts.sitemap_xml),
            "sitemap.xml found", "sitemap.xml not found"
        )
        results["1_06_canonical_tags"] = self.marker(
            checklist, "1_06_canonical_tags", markup.has_canonical(html),
            "Canonical tag found", "No canonical tag"
        )
        
        meta_robots = markup.extract_meta(html, "robots")
        results["1_07_meta_robots"] = self.marker(
            checklist, "1_07_meta_robots", bool(meta_robots),
            f"meta robots: {meta_robots}", "No meta robots tag"
        )
        
        results["1_13_viewport_meta"] = self.marker(
            checklist, "1_13_viewport_meta", markup.has_viewport(html),
            "Viewport meta tag found", "No viewport meta tag"
        )
        results["1_14_charset"] = self.marker(
            checklist, "1_14_charset", markup.has_utf8_charset(html),
            "UTF-8 charset found", "No UTF-8 charset"
        )
        results["1_15_lang_attribute"] = self.marker(
            checklist, "1_15_lang_attribute", markup.has_html_lang(html),
            "Lang attribute found", "No lang attribute on <html>"
        )
        
        return results
