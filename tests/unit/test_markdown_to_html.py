"""Unit tests for the MarkdownToHtml render engine."""

import importlib
from unittest.mock import MagicMock, patch

import pytest

from mdhtml.MarkdownToHtml import MarkdownToHtml
from mdhtml.exceptions import ConfigurationError, ConversionError
from mdhtml.extensions import RenderFlags


TABLE_MD = "| Name | Role |\n|------|------|\n| Ann | Dev |\n"


class TestBaselineRendering:
    """Rendering without any flags."""

    def test_bold(self):
        """**bold** renders as a strong element."""
        html = MarkdownToHtml().markdown_to_html("**bold**")

        assert "<strong>bold</strong>" in html

    def test_heading_and_paragraph(self):
        html = MarkdownToHtml().markdown_to_html("# Title\n\nSome text.")

        assert "<h1>Title</h1>" in html
        assert "<p>Some text.</p>" in html

    def test_empty_text(self):
        assert MarkdownToHtml().markdown_to_html("") == ""

    def test_tables_are_not_parsed(self):
        html = MarkdownToHtml().markdown_to_html(TABLE_MD)

        assert "<table>" not in html

    def test_fenced_code_is_off(self):
        """Without the flag a fence is not a code block."""
        html = MarkdownToHtml().markdown_to_html("```\nx = 1\n```\n")

        assert "<pre>" not in html

    def test_indented_code_still_works(self):
        html = MarkdownToHtml().markdown_to_html("    x = 1\n")

        assert "<pre><code>x = 1" in html

    def test_raw_html_passes_through(self):
        html = MarkdownToHtml().markdown_to_html("Hello <b>there</b>")

        assert "<b>there</b>" in html

    def test_soft_break_is_not_a_hard_break(self):
        html = MarkdownToHtml().markdown_to_html("one\ntwo")

        assert "<br />" not in html

    def test_quotes_are_left_alone(self):
        html = MarkdownToHtml().markdown_to_html('Say "hi"')

        assert "“" not in html


class TestFlags:
    """Each render flag switches on its syntax."""

    def test_tables(self):
        html = MarkdownToHtml(RenderFlags.TABLES).markdown_to_html(TABLE_MD)

        assert "<table>" in html
        assert "Ann" in html

    def test_autolinks(self):
        html = MarkdownToHtml(RenderFlags.AUTOLINKS).markdown_to_html("Visit https://example.com today")

        assert 'href="https://example.com"' in html

    def test_no_autolinks_without_flag(self):
        html = MarkdownToHtml().markdown_to_html("Visit https://example.com today")

        assert "<a " not in html

    def test_fenced_code_blocks(self):
        html = MarkdownToHtml(RenderFlags.FENCED_CODE_BLOCKS).markdown_to_html("```python\nx = 1\n```\n")

        assert "<pre><code" in html
        assert "x = 1" in html

    def test_tilde_fences(self):
        html = MarkdownToHtml(RenderFlags.FENCED_CODE_BLOCKS).markdown_to_html("~~~\nx = 1\n~~~\n")

        assert "<pre><code>x = 1" in html

    def test_hardwraps(self):
        html = MarkdownToHtml(RenderFlags.HARDWRAPS).markdown_to_html("one\ntwo")

        assert "one<br />" in html
        assert "two" in html

    def test_suppress_inline_html(self):
        html = MarkdownToHtml(RenderFlags.SUPPRESS_ALL_HTML).markdown_to_html("Hello <b>there</b>")

        assert "<b>" not in html
        assert "there" in html

    def test_suppress_html_blocks(self):
        html = MarkdownToHtml(RenderFlags.SUPPRESS_ALL_HTML).markdown_to_html(
            "<div>block</div>\n\nafter"
        )

        assert "<div>" not in html
        assert "<p>after</p>" in html

    def test_smart_quotes(self):
        html = MarkdownToHtml(RenderFlags.QUOTES).markdown_to_html('Say "hi"')

        assert "“hi”" in html

    def test_smart_punctuation(self):
        html = MarkdownToHtml(RenderFlags.SMARTS).markdown_to_html("Wait -- what --- now...")

        assert "–" in html
        assert "—" in html
        assert "…" in html

    def test_abbreviations(self):
        """Abbreviation definitions are removed and occurrences wrapped."""
        md = "*[HTML]: Hyper Text Markup Language\n\nHTML is everywhere."

        html = MarkdownToHtml(RenderFlags.ABBREVIATIONS).markdown_to_html(md)

        assert '<abbr title="Hyper Text Markup Language">HTML</abbr> is everywhere.' in html
        assert "*[" not in html

    def test_abbreviations_match_whole_words_only(self):
        md = "*[HT]: Hyper Text\n\nHTML and HT"

        html = MarkdownToHtml(RenderFlags.ABBREVIATIONS).markdown_to_html(md)

        assert "HTML and " in html
        assert '<abbr title="Hyper Text">HT</abbr>' in html

    def test_abbreviations_are_per_document(self):
        """Definitions from one document do not leak into the next."""
        engine = MarkdownToHtml(RenderFlags.ABBREVIATIONS)
        engine.markdown_to_html("*[HTML]: Hyper Text Markup Language\n\nHTML")

        html = engine.markdown_to_html("HTML again")

        assert "<abbr" not in html

    def test_definition_list(self):
        html = MarkdownToHtml(RenderFlags.DEFINITIONS).markdown_to_html("Apple\n: A red fruit")

        assert "<dl><dt>Apple</dt><dd>A red fruit</dd></dl>" in html

    def test_definition_list_multiple_terms(self):
        md = "Apple\n: A red fruit\nLemon\n: A yellow fruit"

        html = MarkdownToHtml(RenderFlags.DEFINITIONS).markdown_to_html(md)

        assert "<dt>Lemon</dt><dd>A yellow fruit</dd>" in html

    def test_ordinary_paragraph_with_definitions_flag(self):
        html = MarkdownToHtml(RenderFlags.DEFINITIONS).markdown_to_html("Just a paragraph.")

        assert "<p>Just a paragraph.</p>" in html
        assert "<dl>" not in html

    def test_no_definition_list_without_flag(self):
        html = MarkdownToHtml().markdown_to_html("Apple\n: A red fruit")

        assert "<dl>" not in html

    def test_flags_are_normalized(self):
        engine = MarkdownToHtml(int(RenderFlags.TABLES))

        assert engine.flags == RenderFlags.TABLES


class TestErrors:
    """Engine failures are reported as mdhtml errors."""

    def test_construction_failure_raises_configuration_error(self):
        engine_module = importlib.import_module("mdhtml.MarkdownToHtml")

        with patch.object(engine_module, "Markdown", side_effect=RuntimeError("bad extension")):
            with pytest.raises(ConfigurationError) as exc_info:
                MarkdownToHtml(RenderFlags.TABLES)

        assert "bad extension" in str(exc_info.value)

    def test_render_failure_raises_conversion_error(self):
        engine = MarkdownToHtml()
        engine.md = MagicMock()
        engine.md.convert.side_effect = ValueError("boom")

        with pytest.raises(ConversionError) as exc_info:
            engine.markdown_to_html("text")

        assert isinstance(exc_info.value.__cause__, ValueError)
