"""
Markup extraction - Regex lookups over raw HTML text.

Pattern matching only, no document tree. Evaluators and remediation routes
both go through these helpers so a check and its fix agree on what
"present" means.
"""

import re
from typing import Optional

TITLE_RE = re.compile(r"<title[^>]*>([^<]*)</title>", re.IGNORECASE)
IMG_TAG_RE = re.compile(r"<img\s[^>]*>", re.IGNORECASE)
CANONICAL_RE = re.compile(r"rel=[\"']canonical[\"']", re.IGNORECASE)
CHARSET_RE = re.compile(r"<meta\s[^>]*charset=", re.IGNORECASE)
UTF8_CHARSET_RE = re.compile(r"charset=[\"']?UTF-8[\"']?", re.IGNORECASE)
HTML_LANG_RE = re.compile(r"<html[^>]*\slang=[\"'][a-z]", re.IGNORECASE)
HTML_LANG_ATTR_RE = re.compile(r"<html[^>]*\slang=", re.IGNORECASE)

# Quoted attribute value; the closing quote must match the opening one
QUOTED_VALUE = r"(?P<quote>[\"'])(?P<value>(?:(?!(?P=quote))[\s\S])*)(?P=quote)"


def has_pattern(html: str, pattern: str) -> bool:
    """Case-insensitive regex search."""
    return re.search(pattern, html, re.IGNORECASE) is not None


def extract_meta(html: str, name: str) -> Optional[str]:
    """Get the content of a <meta> tag keyed by name or property.

    Tries name= and property= with the key attribute either before or
    after content=. First match wins.
    """
    key = re.escape(name)
    patterns = [
        rf"<meta\s[^>]*name=[\"']{key}[\"'][^>]*content={QUOTED_VALUE}",
        rf"<meta\s[^>]*content={QUOTED_VALUE}[^>]*name=[\"']{key}[\"']",
        rf"<meta\s[^>]*property=[\"']{key}[\"'][^>]*content={QUOTED_VALUE}",
        rf"<meta\s[^>]*content={QUOTED_VALUE}[^>]*property=[\"']{key}[\"']",
    ]
    for pattern in patterns:
        match = re.search(pattern, html, re.IGNORECASE)
        if match:
            return match.group("value")
    return None


def extract_title(html: str) -> Optional[str]:
    """Text of the first <title> element, or None when there is none."""
    match = TITLE_RE.search(html)
    return match.group(1).strip() if match else None


def has_title_tag(html: str) -> bool:
    return TITLE_RE.search(html) is not None


def count_headings(html: str, level: int) -> int:
    return len(re.findall(rf"<h{level}[\s>]", html, re.IGNORECASE))


def img_tags(html: str) -> list[str]:
    return IMG_TAG_RE.findall(html)


def has_attribute_value(tag: str, attribute: str, value_pattern: str = r"(?:(?!(?P=quote)).)+") -> bool:
    """Whether a single tag carries attribute="<value_pattern>".

    The default accepts any non-empty value; the other quote character may
    appear inside it.
    """
    pattern = rf"\s{re.escape(attribute)}=(?P<quote>[\"']){value_pattern}(?P=quote)"
    return re.search(pattern, tag, re.IGNORECASE) is not None


def has_schema_type(html: str, schema_type: str) -> bool:
    """Loose JSON-LD check: some @type key and the quoted type name."""
    return '"@type"' in html and f'"{schema_type}"' in html


def has_canonical(html: str) -> bool:
    return CANONICAL_RE.search(html) is not None


def has_utf8_charset(html: str) -> bool:
    return UTF8_CHARSET_RE.search(html) is not None


def has_charset_declaration(html: str) -> bool:
    """Any <meta charset=...> or http-equiv content charset, whatever the value."""
    return CHARSET_RE.search(html) is not None


def has_html_lang(html: str) -> bool:
    """<html lang="..."> with a value starting with a letter."""
    return HTML_LANG_RE.search(html) is not None


def has_html_lang_attribute(html: str) -> bool:
    return HTML_LANG_ATTR_RE.search(html) is not None


def has_viewport(html: str) -> bool:
    return has_pattern(html, r"name=[\"']viewport[\"']")
