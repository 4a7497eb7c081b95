"""Shared test fixtures for the checklist auditor."""

from __future__ import annotations

from pathlib import Path

import pytest

from seo_auditor.services.checklist_store import Checklist
from seo_auditor.services.evaluators.base import Artifacts

FULL_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Acme Plumbing | Emergency Repairs in Springfield</title>
    <meta name="description" content="Acme Plumbing fixes leaks, clogged drains and water heaters across Springfield. Licensed plumbers on call around the clock.">
    <meta name="robots" content="index, follow">
    <link rel="canonical" href="https://acme.example/">
    <link rel="icon" href="/favicon.ico">
    <link rel="preconnect" href="https://fonts.gstatic.com">
    <link rel="preload" as="image" href="/hero.webp">
    <link href="https://fonts.googleapis.com/css2?family=Inter&display=swap" rel="stylesheet">
    <meta property="og:type" content="website">
    <meta property="og:title" content="Acme Plumbing">
    <meta property="og:description" content="Emergency plumbing in Springfield">
    <meta property="og:image" content="https://acme.example/og.png">
    <meta property="og:url" content="https://acme.example/">
    <meta name="twitter:card" content="summary_large_image">
    <script type="application/ld+json">
    {"@context": "https://schema.org", "@graph": [
        {"@type": "Organization"}, {"@type": "LocalBusiness"}, {"@type": "BreadcrumbList"},
        {"@type": "FAQPage"}, {"@type": "Article"}, {"@type": "SpeakableSpecification"}
    ]}
    </script>
    <script src="/app.js" defer></script>
</head>
<body>
    <header><nav aria-label="Main">Menu</nav></header>
    <main>
        <h1>Emergency Plumbing</h1>
        <h2>Services</h2>
        <img src="/hero.webp" alt="Plumber at work" width="800" height="600">
        <img src="/van.webp" alt="Service van" width="400" height="300" loading="lazy">
        <a class="btn btn-primary" href="#contact">Book now</a>
        <a href="tel:+15550100">Call us</a>
        <a href="https://wa.me/15550100">WhatsApp</a>
        <form id="contact" method="post"><label for="name">Name</label><input id="name"></form>
    </main>
    <footer>
        <a href="/privacy-policy">Privacy Policy</a>
        <a href="/terms">Terms of Service</a>
        &copy; 2024 Acme Plumbing
        <div class="cookie-banner">We use cookies. <button>Accept</button></div>
    </footer>
</body>
</html>
"""

SECURE_HEADERS = {
    "Content-Encoding": "gzip",
    "Strict-Transport-Security": "max-age=31536000",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


@pytest.fixture
def empty_checklist() -> Checklist:
    """A checklist with no sections, forcing built-in defaults."""
    return Checklist.empty()


@pytest.fixture
def full_page() -> str:
    """Markup that satisfies every implemented check."""
    return FULL_PAGE


@pytest.fixture
def full_artifacts() -> Artifacts:
    """Artifacts for a page that passes every check."""
    return Artifacts(
        url="https://acme.example/",
        html=FULL_PAGE,
        headers=SECURE_HEADERS,
        robots_txt="User-agent: *\nAllow: /",
        sitemap_xml="<urlset><url><loc>https://acme.example/</loc></url></urlset>",
    )


@pytest.fixture
def bare_artifacts() -> Artifacts:
    """Artifacts for a near-empty page served over plain HTTP."""
    return Artifacts(url="http://bare.example/", html="<html><head></head><body><p>Hello</p></body></html>")


@pytest.fixture
def html_file(tmp_path: Path):
    """Write markup to a temporary index.html and return its path."""

    def _write(markup: str) -> Path:
        path = tmp_path / "index.html"
        path.write_text(markup, encoding="utf-8")
        return path

    return _write
