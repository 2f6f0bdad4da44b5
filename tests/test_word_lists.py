"""
Тесты для WordListStore и TokenFilter.
"""

import pytest

from text_tokenizer.components.token_filter import TokenFilter
from text_tokenizer.components.word_lists import WordListStore
from text_tokenizer.exceptions import InvalidLanguageError
from text_tokenizer.languages import SupportedLanguage


class TestWordListStore:
    """Тесты для WordListStore."""

    def test_add_single_word(self):
        store = WordListStore()
        assert store.add_to_blacklist(SupportedLanguage.EN, "foo") == 1
        assert store.get_blacklist(SupportedLanguage.EN) == ["foo"]

    def test_add_many_words_keeps_order_and_deduplicates(self):
        store = WordListStore()
        store.add_to_blacklist(SupportedLanguage.EN, ["foo", "bar", "foo"])
        assert store.add_to_blacklist(SupportedLanguage.EN, ["bar", "baz"]) == 1
        assert store.get_blacklist(SupportedLanguage.EN) == ["foo", "bar", "baz"]

    def test_repeated_add_is_noop(self):
        store = WordListStore()
        store.add_to_blacklist(SupportedLanguage.RU, "слово")
        assert store.add_to_blacklist(SupportedLanguage.RU, "слово") == 0
        assert store.get_blacklist(SupportedLanguage.RU) == ["слово"]

    def test_words_are_normalized(self):
        """Слова сравниваются с кандидатами в нижнем регистре."""
        store = WordListStore()
        store.add_to_blacklist(SupportedLanguage.EN, ["  Foo ", "FOO", ""])
        assert store.get_blacklist(SupportedLanguage.EN) == ["foo"]

    def test_language_codes_accepted(self):
        store = WordListStore()
        store.add_to_blacklist("en", "foo")
        store.add_to_blacklist("UK", "слово")
        assert store.get_blacklist(SupportedLanguage.EN) == ["foo"]
        assert store.get_blacklist(SupportedLanguage.UA) == ["слово"]

    @pytest.mark.parametrize("language", [SupportedLanguage.AUTO, "auto", "xx", "", 42, None])
    def test_unsupported_language_rejected(self, language):
        store = WordListStore()
        with pytest.raises(InvalidLanguageError):
            store.add_to_blacklist(language, "foo")
        with pytest.raises(InvalidLanguageError):
            store.add_to_whitelist(language, "foo")

    def test_invalid_language_error_is_value_error(self):
        store = WordListStore()
        with pytest.raises(ValueError):
            store.add_to_blacklist("klingon", "foo")

    def test_whitelist_independent_from_blacklist(self):
        store = WordListStore()
        store.add_to_whitelist(SupportedLanguage.EN, "keep")
        assert store.get_whitelist(SupportedLanguage.EN) == ["keep"]
        assert store.get_blacklist(SupportedLanguage.EN) == []
        assert store.is_blacklisted("keep", SupportedLanguage.EN) is False

    def test_is_blacklisted(self):
        store = WordListStore()
        store.add_to_blacklist(SupportedLanguage.EN, "foo")
        store.add_to_blacklist(SupportedLanguage.RU, "бар")

        assert store.is_blacklisted("foo", SupportedLanguage.EN) is True
        assert store.is_blacklisted("foo", SupportedLanguage.RU) is False
        assert store.is_blacklisted_anywhere("бар") is True
        assert store.is_blacklisted_anywhere("baz") is False


class TestTokenFilter:
    """Тесты для TokenFilter."""

    @pytest.fixture
    def token_filter(self):
        store = WordListStore()
        store.add_to_blacklist(SupportedLanguage.EN, "foo")
        store.add_to_blacklist(SupportedLanguage.RU, "бар")
        return TokenFilter(store)

    def test_concrete_language_uses_own_blacklist(self, token_filter):
        assert token_filter.is_accepted("foo", SupportedLanguage.EN) is False
        assert token_filter.is_accepted("бар", SupportedLanguage.EN) is True
        assert token_filter.is_accepted("foo", SupportedLanguage.RU) is True
        assert token_filter.is_accepted("бар", SupportedLanguage.RU) is False

    def test_language_without_list_accepts_everything(self, token_filter):
        assert token_filter.is_accepted("foo", SupportedLanguage.UA) is True

    def test_auto_checks_all_blacklists(self, token_filter):
        assert token_filter.is_accepted("foo", SupportedLanguage.AUTO) is False
        assert token_filter.is_accepted("бар", SupportedLanguage.AUTO) is False
        assert token_filter.is_accepted("baz", SupportedLanguage.AUTO) is True
