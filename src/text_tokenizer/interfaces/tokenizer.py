"""
Абстрактные интерфейсы для компонентов токенизатора.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций
(например, заглушки списка стоп-слов в тестах).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO, Union

from ..languages import SupportedLanguage


@dataclass(frozen=True)
class Token:
    """Нормализованное слово и число его вхождений в тексте."""
    value: str
    count: int

    def __str__(self) -> str:
        return f"{self.value}({self.count})"


LanguageLike = Union[SupportedLanguage, str]
WordOrWords = Union[str, Iterable[str]]


class StopWordProviderInterface(ABC):
    """Интерфейс поставщика стоп-слов."""

    @abstractmethod
    def get_stop_words(self, language: SupportedLanguage) -> List[str]:
        """Возвращает стоп-слова для языка."""
        pass


class HtmlExtractorInterface(ABC):
    """Интерфейс извлечения видимого текста из HTML."""

    @abstractmethod
    def extract_text(self, markup: str) -> str:
        """Возвращает видимый текст документа без script/style."""
        pass


class SplitterInterface(ABC):
    """Интерфейс разбиения текста на кандидаты в токены."""

    @abstractmethod
    def split(self, text: str) -> List[str]:
        """Разбивает текст по разделителям, отбрасывая пустые фрагменты."""
        pass

    @abstractmethod
    def normalize(self, fragment: str) -> Optional[str]:
        """Нормализует фрагмент или возвращает None, если он отклонён."""
        pass


class TokenizerInterface(ABC):
    """Основной интерфейс токенизатора."""

    @abstractmethod
    def set_token_min_length(self, length: int) -> None:
        pass

    @abstractmethod
    def set_token_max_length(self, length: int) -> None:
        pass

    @abstractmethod
    def add_symbol_separator(self, separator: str) -> None:
        pass

    @abstractmethod
    def add_word_to_blacklist(self, language: LanguageLike, words: WordOrWords) -> None:
        pass

    @abstractmethod
    def add_word_to_whitelist(self, language: LanguageLike, words: WordOrWords) -> None:
        pass

    @abstractmethod
    def set_language(self, language: LanguageLike) -> None:
        pass

    @abstractmethod
    def load_text(self, text: str) -> None:
        pass

    @abstractmethod
    def load_html(self, markup: str) -> None:
        pass

    @abstractmethod
    def tokenize(self) -> None:
        """Запускает пайплайн один раз на загруженном тексте."""
        pass

    @abstractmethod
    def get_tokens(self) -> List[Token]:
        """Возвращает токены по убыванию частоты."""
        pass

    @abstractmethod
    def get_top_tokens(self, n: int) -> List[Token]:
        """Возвращает n самых частых токенов."""
        pass

    @abstractmethod
    def print_tokens(self, stream: Optional[TextIO] = None) -> None:
        pass

    @abstractmethod
    def print_top_tokens(self, n: int, stream: Optional[TextIO] = None) -> None:
        pass
