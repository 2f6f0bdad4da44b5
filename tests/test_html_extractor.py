"""
Тесты для компонента HtmlTextExtractor.
"""

import pytest

from text_tokenizer.components.html_extractor import HtmlTextExtractor
from text_tokenizer.exceptions import HtmlParseError


class TestHtmlTextExtractor:
    """Тесты для HtmlTextExtractor."""

    def test_script_removed(self):
        extractor = HtmlTextExtractor()
        text = extractor.extract_text("<p>Hello <script>ignored()</script>World</p>")
        assert text == "Hello World"

    def test_style_removed(self):
        extractor = HtmlTextExtractor()
        text = extractor.extract_text("<style>p { color: red; }</style><div>Visible</div>")
        assert text == "Visible"

    def test_nested_tags(self):
        extractor = HtmlTextExtractor()
        assert extractor.extract_text("<div><span>Texto</span></div>") == "Texto"

    def test_plain_text_passes_through(self):
        extractor = HtmlTextExtractor()
        assert extractor.extract_text("just text") == "just text"

    def test_empty_markup(self):
        extractor = HtmlTextExtractor()
        assert extractor.extract_text("") == ""
        assert extractor.extract_text(None) == ""

    def test_full_document(self, sample_texts):
        extractor = HtmlTextExtractor()
        text = extractor.extract_text(sample_texts["html"])
        assert "weekly report is ready" in text
        assert "analytics" not in text
        assert "hidden" not in text
        assert "color" not in text

    def test_lxml_parser(self):
        extractor = HtmlTextExtractor(parser="lxml")
        text = extractor.extract_text("<p>Hello <script>ignored()</script>World</p>")
        assert text == "Hello World"

    def test_unknown_parser_raises_parse_error(self):
        extractor = HtmlTextExtractor(parser="no-such-parser")
        with pytest.raises(HtmlParseError) as exc_info:
            extractor.extract_text("<p>text</p>")
        assert exc_info.value.__cause__ is not None
