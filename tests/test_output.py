"""Tests for HTML and plain-text output"""

from artist_contracts.models import RenderedSection
from artist_contracts.services.output import (
    TEXT_DIVIDER,
    generate_html,
    generate_text,
    split_paragraphs,
)

SECTIONS = [
    RenderedSection(heading="1. PARTIES", content='Jane Smith p/k/a "J. Melody"\nLondon\n\nAND'),
    RenderedSection(heading="2. TERMS", content="Fees <b>and</b> costs & expenses"),
]


class TestHtml:

    def test_document_skeleton(self):
        html = generate_html("Test Agreement", SECTIONS)
        assert html.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in html
        assert "<title>Test Agreement</title>" in html
        assert '<div class="contract-title">Test Agreement</div>' in html

    def test_styles_included_by_default(self):
        assert "<style>" in generate_html("T", SECTIONS)

    def test_styles_can_be_omitted(self):
        html = generate_html("T", SECTIONS, include_styles=False)
        assert "<style>" not in html
        assert '<div class="contract">' in html

    def test_paragraphs_and_line_breaks(self):
        html = generate_html("T", SECTIONS)
        assert "<p>Jane Smith p/k/a &#34;J. Melody&#34;<br>London</p><p>AND</p>" in html

    def test_user_text_escaped(self):
        html = generate_html("T", SECTIONS)
        assert "Fees &lt;b&gt;and&lt;/b&gt; costs &amp; expenses" in html
        assert "<b>and</b>" not in html

    def test_title_and_heading_escaped(self):
        html = generate_html("A & B <Agreement>", [{"heading": "1. <TERMS>", "content": "x"}])
        assert "<title>A &amp; B &lt;Agreement&gt;</title>" in html
        assert '<div class="section-heading">1. &lt;TERMS&gt;</div>' in html

    def test_section_markup(self):
        html = generate_html("T", [{"heading": "A", "content": "one\ntwo\n\nthree"}])
        assert (
            '<div class="section-content"><p>one<br>two</p><p>three</p></div>'
        ) in html

    def test_headings_in_order(self):
        html = generate_html("T", SECTIONS)
        assert html.index("1. PARTIES") < html.index("2. TERMS")

    def test_accepts_plain_dicts(self):
        html = generate_html("T", [{"heading": "A", "content": "b"}])
        assert '<div class="section-heading">A</div>' in html
        assert "<p>b</p>" in html

    def test_no_sections(self):
        html = generate_html("Empty", [])
        assert '<div class="contract-title">Empty</div>' in html


class TestText:

    def test_title_block(self):
        text = generate_text("Test Agreement", SECTIONS)
        assert text.startswith(f"{TEXT_DIVIDER}\nTEST AGREEMENT\n{TEXT_DIVIDER}\n\n")
        assert len(TEXT_DIVIDER) == 60

    def test_underlined_headings(self):
        text = generate_text("T", SECTIONS)
        assert "1. PARTIES\n----------\n\nJane Smith" in text

    def test_no_markup(self):
        text = generate_text("T", SECTIONS)
        assert "Fees <b>and</b> costs & expenses" in text
        assert "<p>" not in text


class TestParagraphs:

    def test_blank_lines_split(self):
        assert split_paragraphs("a\nb\n\nc") == [["a", "b"], ["c"]]

    def test_single_paragraph(self):
        assert split_paragraphs("only") == [["only"]]
