"""
Компоненты токенизатора.

Каждый компонент отвечает за одну конкретную задачу:
- SymbolSplitter - разбиение и нормализация
- WordListStore - белые и чёрные списки по языкам
- TokenFilter - фильтрация по чёрным спискам
- LetterFrequencyDetector - определение языка
- FrequencyAnalyzer - подсчёт и ранжирование
- DefaultStopWords - встроенные стоп-слова
- HtmlTextExtractor - видимый текст из HTML
- TokenFormatter - вывод результатов
"""

from .splitter import SymbolSplitter, DEFAULT_SEPARATORS
from .word_lists import WordListStore
from .token_filter import TokenFilter
from .language_detector import LetterFrequencyDetector, CHARACTERISTIC_LETTERS
from .frequency_analyzer import FrequencyAnalyzer
from .stop_words import DefaultStopWords, NoStopWords
from .html_extractor import HtmlTextExtractor
from .formatter import TokenFormatter

__all__ = [
    'SymbolSplitter',
    'DEFAULT_SEPARATORS',
    'WordListStore',
    'TokenFilter',
    'LetterFrequencyDetector',
    'CHARACTERISTIC_LETTERS',
    'FrequencyAnalyzer',
    'DefaultStopWords',
    'NoStopWords',
    'HtmlTextExtractor',
    'TokenFormatter',
]
