"""
Remediation routes - Guarded, anchored insertions keyed by check-id prefix.

A route only inserts when its marker is absent, so applying it to an
already-fixed document is a no-op.
"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from seo_auditor.logger import logger
from seo_auditor.schemas.audit_request import RemediationContext, RemediationIssue
from seo_auditor.services.evaluators import markup


class Anchor(Enum):
    """Where a fragment goes."""
    HEAD_START = "head_start"  # right after <head>
    AFTER_TITLE = "after_title"  # right after </title>, else after <head>
    HEAD_END = "head_end"  # right before </head>
    HTML_TAG = "html_tag"  # attribute inside the <html> start tag


HEAD_OPEN_RE = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)
TITLE_CLOSE_RE = re.compile(r"</title>", re.IGNORECASE)
HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)
HTML_OPEN_RE = re.compile(r"<html(?=[\s>])", re.IGNORECASE)
LANG_CODE_RE = re.compile(r"^[a-zA-Z]{2,3}(-[a-zA-Z0-9]+)*$")


def _insert_after(text: str, pattern: re.Pattern, fragment: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return text[:match.end()] + fragment + text[match.end():]


def _insert_before(text: str, pattern: re.Pattern, fragment: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return text[:match.start()] + fragment + text[match.start():]


def insert_at(text: str, anchor: Anchor, fragment: str) -> Optional[str]:
    """Insert a fragment at the first occurrence of an anchor.

    Returns:
        New text, or None when the anchor is not in the document
    """
    if anchor is Anchor.HEAD_START:
        return _insert_after(text, HEAD_OPEN_RE, f"\n    {fragment}")
    if anchor is Anchor.AFTER_TITLE:
        return (
            _insert_after(text, TITLE_CLOSE_RE, f"\n    {fragment}")
            or _insert_after(text, HEAD_OPEN_RE, f"\n    {fragment}")
        )
    if anchor is Anchor.HEAD_END:
        return _insert_before(text, HEAD_CLOSE_RE, f"    {fragment}\n")
    if anchor is Anchor.HTML_TAG:
        return _insert_after(text, HTML_OPEN_RE, f" {fragment}")
    raise ValueError(f"Unknown anchor: {anchor}")


# fragment builder -> (fragment, change description) or None to skip
FragmentBuilder = Callable[[RemediationIssue, RemediationContext], Optional[tuple[str, str]]]


@dataclass(frozen=True)
class Route:
    """A fix for every check-id starting with ``prefix``."""
    name: str
    prefix: str
    is_present: Callable[[str], bool]
    build: FragmentBuilder
    anchor: Anchor

    def matches(self, check_id: str) -> bool:
        return check_id.startswith(self.prefix)

    def apply(self, text: str, issue: RemediationIssue, context: RemediationContext) -> tuple[str, Optional[str]]:
        """Apply the route to a document text.

        Returns:
            (text, change) where change is None when nothing was inserted
        """
        if self.is_present(text):
            return text, None

        built = self.build(issue, context)
        if built is None:
            logger.debug(f"Route {self.name}: nothing to insert for {issue.check_id}")
            return text, None

        fragment, change = built
        patched = insert_at(text, self.anchor, fragment)
        if patched is None:
            logger.warning(f"Route {self.name}: anchor {self.anchor.value} not found, skipping {issue.check_id}")
            return text, None

        return patched, change


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _display_name(context: RemediationContext) -> str:
    return context.display_name or "Website"


# --- Fragment builders ---

def _title(issue: RemediationIssue, context: RemediationContext):
    text = issue.fix_instruction.strip()
    if not text:
        parts = [_display_name(context)]
        if context.site_id:
            parts.append(context.site_id)
        text = " | ".join(parts)
    return f"<title>{html.escape(text, quote=False)}</title>", f'Added title tag: "{text}"'


def _description(issue: RemediationIssue, context: RemediationContext):
    text = issue.fix_instruction.strip() or f"{_display_name(context)} - Professional services. Contact us today."
    return f'<meta name="description" content="{_attr(text)}">', "Added meta description"


def _canonical(issue: RemediationIssue, context: RemediationContext):
    href = f"https://{context.site_id}/" if context.site_id else issue.fix_instruction.strip()
    if not href:
        return None
    return f'<link rel="canonical" href="{_attr(href)}">', f"Added canonical tag: {href}"


def _robots(issue: RemediationIssue, context: RemediationContext):
    return '<meta name="robots" content="index, follow">', "Added meta robots: index, follow"


def _viewport(issue: RemediationIssue, context: RemediationContext):
    return '<meta name="viewport" content="width=device-width, initial-scale=1.0">', "Added viewport meta tag"


def _charset(issue: RemediationIssue, context: RemediationContext):
    return '<meta charset="UTF-8">', "Added charset UTF-8"


def _lang(issue: RemediationIssue, context: RemediationContext):
    code = issue.fix_instruction.strip()
    if not LANG_CODE_RE.match(code):
        code = "en"
    return f'lang="{code}"', f'Added lang="{code}" to <html>'


def _open_graph(prop: str, default: Callable[[RemediationContext], Optional[str]]) -> FragmentBuilder:
    def build(issue: RemediationIssue, context: RemediationContext):
        value = issue.fix_instruction.strip()
        # Accept "og:title: Some Title" as well as a bare value
        if value.lower().startswith(prop + ":"):
            value = value[len(prop) + 1:].strip()
        value = value or default(context) or ""
        if not value:
            return None
        return f'<meta property="{prop}" content="{_attr(value)}">', f"Added {prop} tag"
    return build


def _og_url(context: RemediationContext) -> Optional[str]:
    return f"https://{context.site_id}/" if context.site_id else None


def _no_default(context: RemediationContext) -> Optional[str]:
    return None


def _meta_present(name: str) -> Callable[[str], bool]:
    return lambda text: markup.extract_meta(text, name) is not None


ROUTES: tuple[Route, ...] = (
    Route("title", "2_01", markup.has_title_tag, _title, Anchor.HEAD_START),
    Route("meta_description", "2_02", _meta_present("description"), _description, Anchor.AFTER_TITLE),
    Route("canonical", "1_06", markup.has_canonical, _canonical, Anchor.AFTER_TITLE),
    Route("meta_robots", "1_07", _meta_present("robots"), _robots, Anchor.AFTER_TITLE),
    Route("viewport", "1_13", markup.has_viewport, _viewport, Anchor.HEAD_START),
    Route("charset", "1_14", markup.has_charset_declaration, _charset, Anchor.HEAD_START),
    Route("html_lang", "1_15", markup.has_html_lang_attribute, _lang, Anchor.HTML_TAG),
    Route("og_type", "4_01", _meta_present("og:type"), _open_graph("og:type", lambda c: "website"), Anchor.HEAD_END),
    Route("og_title", "4_02", _meta_present("og:title"), _open_graph("og:title", lambda c: c.display_name), Anchor.HEAD_END),
    Route("og_description", "4_03", _meta_present("og:description"), _open_graph("og:description", _no_default), Anchor.HEAD_END),
    Route("og_image", "4_04", _meta_present("og:image"), _open_graph("og:image", _no_default), Anchor.HEAD_END),
    Route("og_url", "4_05", _meta_present("og:url"), _open_graph("og:url", _og_url), Anchor.HEAD_END),
)
