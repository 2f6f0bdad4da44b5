"""
Хранилище белых и чёрных списков слов по языкам.

Чёрный список участвует в фильтрации. Белый список хранится,
но фильтром пока не используется: он зарезервирован под будущий
механизм принудительного включения слов.
"""

from typing import Dict, Iterable, List, Union
import logging

from ..languages import SupportedLanguage

logger = logging.getLogger(__name__)


class WordListStore:
    """Списки слов, сгруппированные по конкретным языкам."""

    def __init__(self):
        # dict сохраняет порядок вставки и даёт O(1) проверку вхождения
        self._blacklist: Dict[SupportedLanguage, Dict[str, None]] = {}
        self._whitelist: Dict[SupportedLanguage, Dict[str, None]] = {}

    @staticmethod
    def _prepare(words: Union[str, Iterable[str]]) -> List[str]:
        if isinstance(words, str):
            words = [words]
        prepared = []
        for word in words:
            # Слова сравниваются с уже нормализованными кандидатами
            normalized = str(word).strip().lower()
            if normalized:
                prepared.append(normalized)
        return prepared

    def _add(self, store: Dict[SupportedLanguage, Dict[str, None]],
             language: Union[SupportedLanguage, str],
             words: Union[str, Iterable[str]]) -> int:
        language = SupportedLanguage.parse_concrete(language)
        bucket = store.setdefault(language, {})
        before = len(bucket)
        for word in self._prepare(words):
            bucket.setdefault(word, None)
        added = len(bucket) - before
        logger.debug(f"Список {language.value}: добавлено {added} слов, всего {len(bucket)}")
        return added

    def add_to_blacklist(self, language: Union[SupportedLanguage, str],
                         words: Union[str, Iterable[str]]) -> int:
        """
        Добавляет слово или слова в чёрный список языка.

        Args:
            language: Конкретный язык (AUTO не допускается)
            words: Слово или последовательность слов

        Returns:
            Количество реально добавленных (новых) слов
        """
        return self._add(self._blacklist, language, words)

    def add_to_whitelist(self, language: Union[SupportedLanguage, str],
                         words: Union[str, Iterable[str]]) -> int:
        """Добавляет слово или слова в белый список языка."""
        return self._add(self._whitelist, language, words)

    def get_blacklist(self, language: Union[SupportedLanguage, str]) -> List[str]:
        language = SupportedLanguage.parse_concrete(language)
        return list(self._blacklist.get(language, {}))

    def get_whitelist(self, language: Union[SupportedLanguage, str]) -> List[str]:
        language = SupportedLanguage.parse_concrete(language)
        return list(self._whitelist.get(language, {}))

    def is_blacklisted(self, word: str, language: SupportedLanguage) -> bool:
        """Проверяет слово по чёрному списку одного языка."""
        return word in self._blacklist.get(language, {})

    def is_blacklisted_anywhere(self, word: str) -> bool:
        """Проверяет слово по чёрным спискам всех языков."""
        return any(word in bucket for bucket in self._blacklist.values())
