"""Unit tests for the regex markup helpers."""

from __future__ import annotations

import pytest

from seo_auditor.services.evaluators import markup


class TestExtractMeta:
    """extract_meta must find name/property keys in either attribute order."""

    @pytest.mark.parametrize(
        "tag",
        [
            '<meta name="description" content="Plumbing">',
            '<meta content="Plumbing" name="description">',
            "<meta name='description' content='Plumbing'>",
            '<META NAME="description" CONTENT="Plumbing">',
        ],
    )
    def test_name_in_any_order(self, tag):
        assert markup.extract_meta(f"<head>{tag}</head>", "description") == "Plumbing"

    def test_property_attribute(self):
        html = '<meta content="Acme" property="og:title">'
        assert markup.extract_meta(html, "og:title") == "Acme"

    def test_first_match_wins(self):
        html = '<meta name="robots" content="noindex"><meta name="robots" content="index">'
        assert markup.extract_meta(html, "robots") == "noindex"

    def test_absent_returns_none(self):
        assert markup.extract_meta("<head></head>", "description") is None

    def test_empty_content_is_not_none(self):
        assert markup.extract_meta('<meta name="description" content="">', "description") == ""

    def test_name_is_not_a_regex(self):
        html = '<meta property="ogXtitle" content="wrong">'
        assert markup.extract_meta(html, "og.title") is None

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("<meta name=\"description\" content=\"We're Springfield's plumbers\">", "We're Springfield's plumbers"),
            ("<meta name='description' content='The \"best\" plumbers'>", 'The "best" plumbers'),
            ("<meta content=\"Joe's Pipes\" name=\"description\">", "Joe's Pipes"),
        ],
    )
    def test_other_quote_inside_value(self, tag, expected):
        assert markup.extract_meta(tag, "description") == expected

    def test_value_does_not_run_into_next_tag(self):
        html = '<meta content="first"><meta name="description">'
        assert markup.extract_meta(html, "description") is None


class TestTitleAndHeadings:

    def test_extract_title_strips_whitespace(self):
        assert markup.extract_title("<title>  Acme Plumbing  </title>") == "Acme Plumbing"

    def test_missing_title(self):
        assert markup.extract_title("<head></head>") is None
        assert not markup.has_title_tag("<head></head>")

    def test_count_headings_ignores_header_element(self):
        html = "<header></header><h1>A</h1><h1 class='x'>B</h1><h2>C</h2>"
        assert markup.count_headings(html, 1) == 2
        assert markup.count_headings(html, 2) == 1
        assert markup.count_headings(html, 3) == 0


class TestTagAttributes:

    def test_img_tags(self):
        html = '<img src="a.png" alt="A"><p>x</p><IMG src="b.png">'
        assert len(markup.img_tags(html)) == 2

    def test_attribute_value_requires_non_empty(self):
        assert markup.has_attribute_value('<img src="a" alt="Logo">', "alt")
        assert not markup.has_attribute_value('<img src="a" alt="">', "alt")

    def test_attribute_value_with_apostrophe(self):
        assert markup.has_attribute_value("<img src=\"a\" alt=\"Plumber's van\">", "alt")
        assert markup.has_attribute_value("<img src='a' loading='lazy'>", "loading", "lazy")

    def test_attribute_value_pattern(self):
        tag = '<img src="a" width="100" height="auto">'
        assert markup.has_attribute_value(tag, "width", r"\d+")
        assert not markup.has_attribute_value(tag, "height", r"\d+")


class TestDocumentMarkers:

    def test_schema_type_needs_type_key(self):
        assert markup.has_schema_type('{"@type": "FAQPage"}', "FAQPage")
        assert not markup.has_schema_type('{"kind": "FAQPage"}', "FAQPage")

    def test_html_lang(self):
        assert markup.has_html_lang('<html lang="en-GB">')
        assert not markup.has_html_lang("<html>")
        assert not markup.has_html_lang('<html lang="">')
        assert markup.has_html_lang_attribute('<html lang="">')

    def test_charset(self):
        assert markup.has_utf8_charset('<meta charset="utf-8">')
        assert not markup.has_utf8_charset('<meta charset="ISO-8859-1">')
        assert markup.has_charset_declaration('<meta charset="ISO-8859-1">')
        assert markup.has_charset_declaration(
            '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">'
        )
