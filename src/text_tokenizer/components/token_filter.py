"""
Фильтр нормализованных кандидатов по чёрным спискам.
"""

from ..languages import SupportedLanguage
from .word_lists import WordListStore


class TokenFilter:
    """Принимает или отклоняет кандидата с учётом активного языка."""

    def __init__(self, word_lists: WordListStore):
        self.word_lists = word_lists

    def is_accepted(self, candidate: str, language: SupportedLanguage) -> bool:
        """
        Проверяет кандидата.

        Args:
            candidate: Нормализованный кандидат
            language: Активный язык; AUTO означает проверку по всем чёрным спискам

        Returns:
            True если кандидат не найден в применимых чёрных списках
        """
        if language is SupportedLanguage.AUTO:
            return not self.word_lists.is_blacklisted_anywhere(candidate)
        return not self.word_lists.is_blacklisted(candidate, language)
