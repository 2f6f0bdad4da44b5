"""
Модуль токенизатора

Собирает компоненты в пайплайн:
определение языка → разбиение → нормализация → фильтрация → подсчёт → ранжирование.

Экземпляр Tokenizer рассчитан на последовательное использование одним
владельцем: настройки, загрузка текста и tokenize() меняют состояние
экземпляра без синхронизации. Разные экземпляры общего состояния не имеют.
"""

import re
from typing import Dict, List, Optional, TextIO
import logging

import pandas as pd

from .config import Config, config as default_config
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.formatter import TokenFormatter
from .components.html_extractor import HtmlTextExtractor
from .components.language_detector import LetterFrequencyDetector
from .components.splitter import SymbolSplitter
from .components.stop_words import DefaultStopWords, NoStopWords
from .components.token_filter import TokenFilter
from .components.word_lists import WordListStore
from .interfaces.tokenizer import (
    HtmlExtractorInterface,
    LanguageLike,
    StopWordProviderInterface,
    Token,
    TokenizerInterface,
    WordOrWords,
)
from .languages import SupportedLanguage

logger = logging.getLogger(__name__)

LINE_BREAKS = re.compile(r'\r\n|\r|\n')


class Tokenizer(TokenizerInterface):
    """Токенизатор текста с подсчётом и ранжированием слов"""

    def __init__(self,
                 settings: Optional[Config] = None,
                 stop_words: Optional[StopWordProviderInterface] = None,
                 html_extractor: Optional[HtmlExtractorInterface] = None,
                 detector: Optional[LetterFrequencyDetector] = None):
        """
        Инициализация токенизатора

        Значения по умолчанию читаются из конфигурации один раз,
        дальше экземпляр владеет своими настройками.

        Args:
            settings: Конфигурация (по умолчанию глобальная config)
            stop_words: Поставщик стоп-слов (по умолчанию stopwordsiso)
            html_extractor: Извлекатель текста из HTML (по умолчанию BeautifulSoup)
            detector: Детектор языка
        """
        settings = settings or default_config

        self.splitter = SymbolSplitter(
            min_length=settings.get_min_token_length(),
            max_length=settings.get_max_token_length(),
            ignore_digits=settings.is_ignore_digits_enabled(),
            separators=settings.get_extra_separators(),
        )
        self.word_lists = WordListStore()
        self.token_filter = TokenFilter(self.word_lists)
        self.detector = detector or LetterFrequencyDetector()
        if stop_words is not None:
            self.stop_words = stop_words
        elif settings.is_default_stop_words_enabled():
            self.stop_words = DefaultStopWords()
        else:
            self.stop_words = NoStopWords()
        self.html_extractor = html_extractor or HtmlTextExtractor(parser=settings.get_html_parser())
        self.frequency_analyzer = FrequencyAnalyzer()
        self.formatter = TokenFormatter()

        self.current_language = SupportedLanguage.parse(settings.get_default_language())
        self.language_scores: Dict[SupportedLanguage, int] = {}
        self._detected_language: Optional[SupportedLanguage] = None
        self._text = ""

    # ===== Настройки =====

    @property
    def ignore_digits(self) -> bool:
        return self.splitter.ignore_digits

    @ignore_digits.setter
    def ignore_digits(self, value: bool) -> None:
        self.splitter.ignore_digits = bool(value)

    @property
    def min_length(self) -> int:
        return self.splitter.min_length

    @property
    def max_length(self) -> int:
        return self.splitter.max_length

    @property
    def separators(self) -> frozenset:
        return self.splitter.separators

    @property
    def text(self) -> str:
        """Текущий загруженный текст"""
        return self._text

    def set_token_min_length(self, length: int) -> None:
        self.splitter.min_length = int(length)

    def set_token_max_length(self, length: int) -> None:
        self.splitter.max_length = int(length)

    def add_symbol_separator(self, separator: str) -> None:
        """Добавляет разделитель; повторное добавление ничего не меняет"""
        self.splitter.add_separator(separator)

    def add_word_to_blacklist(self, language: LanguageLike, words: WordOrWords) -> None:
        """
        Добавляет слово или слова в чёрный список

        Raises:
            InvalidLanguageError: для неизвестного языка или AUTO
        """
        self.word_lists.add_to_blacklist(language, words)

    def add_word_to_whitelist(self, language: LanguageLike, words: WordOrWords) -> None:
        """
        Добавляет слово или слова в белый список

        Белый список хранится, но пока не участвует в фильтрации.
        """
        self.word_lists.add_to_whitelist(language, words)

    def get_blacklist(self, language: LanguageLike) -> List[str]:
        return self.word_lists.get_blacklist(language)

    def get_whitelist(self, language: LanguageLike) -> List[str]:
        return self.word_lists.get_whitelist(language)

    def set_language(self, language: LanguageLike) -> None:
        """
        Устанавливает активный язык

        Внимание: tokenize() всегда заново определяет язык и перезаписывает
        это значение. Установка влияет только на is_accepted() до запуска.
        """
        self.current_language = SupportedLanguage.parse(language)

    @property
    def detected_language(self) -> Optional[SupportedLanguage]:
        """Язык, определённый последним tokenize() (None до первого запуска)"""
        return self._detected_language

    # ===== Загрузка текста =====

    def load_text(self, text: str) -> None:
        """Загружает текст; переводы строк заменяются пробелами"""
        self._text = LINE_BREAKS.sub(' ', text or '')
        logger.debug(f"Загружен текст длиной {len(self._text)}")

    def load_html(self, markup: str) -> None:
        """
        Загружает видимый текст HTML-документа

        Raises:
            HtmlParseError: при ошибке разбора; ранее загруженный текст сохраняется
        """
        visible_text = self.html_extractor.extract_text(markup)
        self.load_text(visible_text)

    # ===== Пайплайн =====

    def detect_language(self) -> SupportedLanguage:
        """Определяет язык загруженного текста и делает его активным"""
        self.language_scores = self.detector.score(self._text)
        self.current_language = self.detector.detect(self._text)
        self._detected_language = self.current_language
        logger.info(f"Определён язык: {self.current_language.value}")
        return self.current_language

    def is_accepted(self, candidate: str) -> bool:
        """Проверяет нормализованного кандидата по чёрным спискам активного языка"""
        return self.token_filter.is_accepted(candidate, self.current_language)

    def tokenize(self) -> None:
        """
        Запускает пайплайн на загруженном тексте

        Результаты предыдущего запуска отбрасываются.
        """
        language = self.detect_language()
        stop_words = self.stop_words.get_stop_words(language)
        if stop_words:
            self.word_lists.add_to_blacklist(language, stop_words)

        accepted = (
            candidate for candidate in self.splitter.iter_candidates(self._text)
            if self.is_accepted(candidate)
        )
        frequencies = self.frequency_analyzer.count_frequency(accepted)
        logger.info(
            f"Токенизация завершена: {len(frequencies)} уникальных токенов, "
            f"{sum(frequencies.values())} вхождений"
        )

    # ===== Результаты =====

    def get_tokens(self, descending: bool = True) -> List[Token]:
        """
        Возвращает все токены по частоте

        Args:
            descending: По убыванию (по умолчанию) или по возрастанию частоты.
                При равной частоте токены идут по значению по возрастанию.
        """
        return self.frequency_analyzer.get_ranked(descending=descending)

    def get_top_tokens(self, n: int) -> List[Token]:
        """Возвращает n самых частых токенов"""
        return self.frequency_analyzer.get_most_frequent(n)

    def get_statistics(self) -> Dict[str, int]:
        """Статистика последнего запуска"""
        return self.frequency_analyzer.get_frequency_statistics()

    def get_frequency_distribution(self) -> Dict[int, int]:
        """Сколько уникальных токенов встретилось с каждой частотой"""
        return self.frequency_analyzer.get_frequency_distribution()

    def get_frequency_table(self, n: Optional[int] = None) -> pd.DataFrame:
        """Таблица value/count/share для всех или n самых частых токенов"""
        tokens = self.get_tokens() if n is None else self.get_top_tokens(n)
        return self.formatter.to_dataframe(tokens)

    def print_tokens(self, stream: Optional[TextIO] = None) -> None:
        """Выводит все токены в виде value(count)"""
        self.formatter.write(self.get_tokens(), stream)

    def print_top_tokens(self, n: int, stream: Optional[TextIO] = None) -> None:
        """Выводит n самых частых токенов в виде value(count)"""
        self.formatter.write(self.get_top_tokens(n), stream)
