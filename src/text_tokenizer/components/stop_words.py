"""
Встроенный поставщик стоп-слов на основе stopwordsiso.
"""

from typing import Dict, List
import logging

import stopwordsiso

from ..interfaces.tokenizer import StopWordProviderInterface
from ..languages import SupportedLanguage

logger = logging.getLogger(__name__)

# Коды ISO 639-1 в stopwordsiso
ISO_CODES: Dict[SupportedLanguage, str] = {
    SupportedLanguage.EN: 'en',
    SupportedLanguage.RU: 'ru',
    SupportedLanguage.UA: 'uk',
}


class DefaultStopWords(StopWordProviderInterface):
    """Стоп-слова из stopwordsiso с кэшированием по языку."""

    def __init__(self):
        self._cache: Dict[SupportedLanguage, List[str]] = {}

    def get_stop_words(self, language: SupportedLanguage) -> List[str]:
        """
        Возвращает отсортированный список стоп-слов языка.

        Для AUTO и языков без данных возвращается пустой список.
        """
        language = SupportedLanguage.parse(language)
        if language in self._cache:
            return list(self._cache[language])

        code = ISO_CODES.get(language)
        if code is None or not stopwordsiso.has_lang(code):
            logger.debug(f"Нет стоп-слов для языка {language.value}")
            words: List[str] = []
        else:
            words = sorted(stopwordsiso.stopwords(code))
            logger.debug(f"Загружено {len(words)} стоп-слов для {language.value}")

        self._cache[language] = words
        return list(words)


class NoStopWords(StopWordProviderInterface):
    """Поставщик без стоп-слов: фильтрация только по пользовательским спискам."""

    def get_stop_words(self, language: SupportedLanguage) -> List[str]:
        return []
