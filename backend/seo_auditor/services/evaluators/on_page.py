"""
On-Page SEO - Title, description, headings and images.

Length and coverage checks grade into done / partial / missing; image
checks are not applicable on pages without images.
"""
from seo_auditor.schemas.audit_result import ItemResult
from seo_auditor.services.checklist_store import CheckDefinition, Checklist
from seo_auditor.services.evaluators import markup
from seo_auditor.services.evaluators.base import Artifacts, Evaluator, count_status, length_status

TITLE_RANGE = (30, 70)
DESCRIPTION_RANGE = (100, 170)


class OnPageEvaluator(Evaluator):
    """Content-level markup on the page itself."""
    
    section_id = "2_on_page_seo"
    label = "On-Page SEO"
    DEFAULTS = {
        "2_01_title_tag": CheckDefinition("Title tag", "critical", "Write a unique 30-70 character <title>"),
        "2_02_meta_description": CheckDefinition("Meta description", "critical", "Write a 100-170 character meta description"),
        "2_03_h1_tag": CheckDefinition("H1 tag", "critical", "Use exactly one <h1> per page"),
        "2_04_heading_hierarchy": CheckDefinition("Heading hierarchy", "high", "Structure content with H1 -> H2 -> H3"),
        "2_07_image_alt_tags": CheckDefinition("Image alt tags", "critical", "Add descriptive alt text to every image"),
        "2_08_image_dimensions": CheckDefinition("Image dimensions", "high", "Set width and height on every <img>"),
        "2_11_image_lazy_loading": CheckDefinition("Lazy loading", "high", 'Add loading="lazy" to below-the-fold images'),
        "2_20_favicon": CheckDefinition("Favicon", "medium", 'Add <link rel="icon"> to <head>'),
    }
    
    def evaluate(self, artifacts: Artifacts, checklist: Checklist) -> dict[str, ItemResult]:
        html = artifacts.html
        results = {}
        
        # Title
        title = markup.extract_title(html)
        if title:
            details = f'Title ({len(title)} chars): "{title}"'
        else:
            details = "No title tag found"
        results["2_01_title_tag"] = self.result(
            checklist, "2_01_title_tag", length_status(title, *TITLE_RANGE), details
        )
        
        # Meta description
        description = markup.extract_meta(html, "description")
        details = f"Meta description ({len(description)} chars)" if description else "No meta description"
        results["2_02_meta_description"] = self.result(
            checklist, "2_02_meta_description", length_status(description, *DESCRIPTION_RANGE), details
        )
        
        # Headings
        h1_count = markup.count_headings(html, 1)
        h2_count = markup.count_headings(html, 2)
        h3_count = markup.count_headings(html, 3)
        
        if h1_count == 1:
            h1_status = "done"
        elif h1_count > 1:
            h1_status = "partial"
        else:
            h1_status = "missing"
        results["2_03_h1_tag"] = self.result(
            checklist, "2_03_h1_tag", h1_status, f"Found {h1_count} H1 tag(s)"
        )
        
        hierarchy_ok = h1_count >= 1 and h2_count >= 1
        results["2_04_heading_hierarchy"] = self.result(
            checklist, "2_04_heading_hierarchy", "done" if hierarchy_ok else "partial",
            f"H1:{h1_count} H2:{h2_count} H3:{h3_count}"
        )
        
        # Images
        images = markup.img_tags(html)
        total = len(images)
        with_alt = sum(1 for tag in images if markup.has_attribute_value(tag, "alt"))
        with_dims = sum(
            1 for tag in images
            if markup.has_attribute_value(tag, "width", r"\d+") and markup.has_attribute_value(tag, "height", r"\d+")
        )
        with_lazy = sum(1 for tag in images if markup.has_attribute_value(tag, "loading", "lazy"))
        
        results["2_07_image_alt_tags"] = self.result(
            checklist, "2_07_image_alt_tags", count_status(with_alt, total),
            f"{with_alt}/{total} images have alt text"
        )
        results["2_08_image_dimensions"] = self.result(
            checklist, "2_08_image_dimensions", count_status(with_dims, total),
            f"{with_dims}/{total} images have dimensions"
        )
        
        # A single image is usually above the fold, so lazy loading only matters with more
        if total <= 1:
            lazy_status = "not_applicable"
        else:
            lazy_status = "done" if with_lazy > 0 else "missing"
        results["2_11_image_lazy_loading"] = self.result(
            checklist, "2_11_image_lazy_loading", lazy_status,
            f"{with_lazy} images with lazy loading"
        )
        
        has_favicon = (
            markup.has_pattern(html, r"rel=[\"'](icon|shortcut icon)[\"']")
            or markup.has_pattern(html, r"favicon")
        )
        results["2_20_favicon"] = self.marker(
            checklist, "2_20_favicon", has_favicon, "Favicon found", "No favicon detected"
        )
        
        return results
