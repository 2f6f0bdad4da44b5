"""
Интеграционные тесты с настоящими stopwordsiso и парсерами BeautifulSoup.
"""

import pytest
import stopwordsiso

from text_tokenizer import Tokenizer, SupportedLanguage
from text_tokenizer.components.html_extractor import HtmlTextExtractor
from text_tokenizer.components.stop_words import DefaultStopWords, NoStopWords


@pytest.mark.integration
def test_english_stop_words_removed(sample_texts):
    """Определённый английский язык подмешивает его стоп-слова."""
    tokenizer = Tokenizer(stop_words=DefaultStopWords())
    tokenizer.load_text(sample_texts["en"])
    tokenizer.tokenize()

    values = {token.value for token in tokenizer.get_tokens()}
    assert tokenizer.current_language is SupportedLanguage.EN
    assert "the" not in values
    assert "festival" in values
    assert not values & stopwordsiso.stopwords("en")


@pytest.mark.integration
@pytest.mark.parametrize("key,language,iso_code", [
    ("ru", SupportedLanguage.RU, "ru"),
    ("ua", SupportedLanguage.UA, "uk"),
])
def test_cyrillic_languages(sample_texts, key, language, iso_code):
    tokenizer = Tokenizer(stop_words=DefaultStopWords())
    tokenizer.load_text(sample_texts[key])
    tokenizer.tokenize()

    values = {token.value for token in tokenizer.get_tokens()}
    assert tokenizer.current_language is language
    assert values
    assert not values & stopwordsiso.stopwords(iso_code)


@pytest.mark.integration
@pytest.mark.parametrize("parser", ["html.parser", "lxml"])
def test_html_document_pipeline(sample_texts, parser):
    """HTML → видимый текст → ранжированные токены."""
    tokenizer = Tokenizer(stop_words=NoStopWords(),
                          html_extractor=HtmlTextExtractor(parser=parser))
    tokenizer.load_html(sample_texts["html"])
    tokenizer.tokenize()

    tokens = tokenizer.get_tokens()
    values = [token.value for token in tokens]
    assert "analytics" not in values
    assert "hidden" not in values
    assert "console" not in values
    # title + два абзаца
    assert tokens[0].value == "report"
    assert tokens[0].count == 3
    assert tokenizer.current_language is SupportedLanguage.EN


@pytest.mark.integration
def test_default_stop_words_cached():
    provider = DefaultStopWords()
    first = provider.get_stop_words(SupportedLanguage.EN)
    second = provider.get_stop_words(SupportedLanguage.EN)
    assert first == second
    assert first == sorted(first)
    assert provider.get_stop_words(SupportedLanguage.AUTO) == []
