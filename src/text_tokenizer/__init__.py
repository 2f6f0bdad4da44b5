"""
Text Tokenizer - разбиение текста на ранжированные токены

Этот модуль предоставляет инструменты для:
- Загрузки обычного текста и HTML (без script/style)
- Разбиения по настраиваемым символам-разделителям
- Наивного определения языка по частоте букв
- Фильтрации по стоп-словам и чёрным спискам
- Подсчёта и ранжирования токенов
"""

__version__ = "0.1.0"

from .exceptions import TokenizerError, InvalidLanguageError, HtmlParseError
from .languages import SupportedLanguage
from .interfaces.tokenizer import Token
from .tokenizer import Tokenizer

__all__ = [
    "Tokenizer",
    "Token",
    "SupportedLanguage",
    "TokenizerError",
    "InvalidLanguageError",
    "HtmlParseError",
]
