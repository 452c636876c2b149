"""Integration tests for the full loader → scaffolder pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

import html_to_react
from html_to_react.errors import ConversionError, InvalidMarkupError

SITE_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>Demo Shop</title>
  <link rel="stylesheet" href="css/site.css">
  <style>
    .hero { padding: 2rem; }
  </style>
</head>
<body>
  <section class="hero main-banner" id="top">
    <h1>Welcome {friend}</h1>
    <img src="images/logo.png" alt="Logo">
    <input type="checkbox" checked disabled>
    <p style="font-size: 12px; background-color: #eee">Fish &amp; chips</p>
  </section>
  <script src="https://cdn.example.com/lib.js"></script>
</body>
</html>
"""


@pytest.fixture
def site(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    (root / "images").mkdir(parents=True)
    (root / "css").mkdir()
    (root / "images" / "logo.png").write_bytes(b"png")
    (root / "css" / "site.css").write_text("body {}", encoding="utf-8")
    page = root / "index.html"
    page.write_text(SITE_HTML, encoding="utf-8")
    return page


def test_full_conversion(site: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "app"
    result = html_to_react.convert_html_to_react(
        site, output_dir, component_name="Shop"
    )

    assert result.fallback_used is False
    source = result.component_path.read_text(encoding="utf-8")
    assert "const Shop = () => {" in source
    assert "export default Shop;" in source
    assert (
        '<section className={`${styles.hero} ${styles[\'main-banner\']}`} id="top">'
        in source
    )
    assert "Welcome {'{'}friend{'}'}" in source
    assert '<img src="images/logo.png" alt="Logo" />' in source
    assert '<input type="checkbox" checked disabled />' in source
    assert "<p style={{ fontSize: '12px', backgroundColor: '#eee' }}>" in source
    assert "Fish &amp; chips" in source

    styles = (output_dir / "src" / "styles" / "Shop.module.css").read_text(
        encoding="utf-8"
    )
    assert ".hero { padding: 2rem; }" in styles
    index_html = (output_dir / "public" / "index.html").read_text(encoding="utf-8")
    assert "<title>Demo Shop</title>" in index_html

    assert (output_dir / "public" / "images" / "logo.png").read_bytes() == b"png"
    assert (output_dir / "public" / "css" / "site.css").is_file()
    assert result.assets == (
        "css/site.css",
        "images/logo.png",
        "https://cdn.example.com/lib.js",
    )


def test_conversion_is_deterministic(site: Path, tmp_path: Path) -> None:
    first = html_to_react.convert_html_to_react(site, tmp_path / "a")
    second = html_to_react.convert_html_to_react(site, tmp_path / "b")
    assert first.component_path.read_text(
        encoding="utf-8"
    ) == second.component_path.read_text(encoding="utf-8")


def test_dropping_inline_styles(site: Path, tmp_path: Path) -> None:
    result = html_to_react.convert_html_to_react(
        site, tmp_path / "app", drop_inline_styles=True
    )
    source = result.component_path.read_text(encoding="utf-8")
    assert "style=" not in source
    assert "<p>" in source


def test_invalid_markup_writes_nothing(write_html, tmp_path: Path) -> None:
    source = write_html("just text, no markup")
    output_dir = tmp_path / "app"
    with pytest.raises(InvalidMarkupError):
        html_to_react.convert_html_to_react(source, output_dir)
    assert not output_dir.exists()


def test_invalid_component_name(site: Path, tmp_path: Path) -> None:
    with pytest.raises(ConversionError):
        html_to_react.convert_html_to_react(
            site, tmp_path / "app", component_name="lower"
        )
