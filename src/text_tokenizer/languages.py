"""
Реестр поддерживаемых языков.

Порядок объявления членов перечисления фиксирован и используется
детектором языка для разрешения ничьих: при равных оценках побеждает
язык, объявленный раньше.
"""

from enum import Enum
from typing import List, Union

from .exceptions import InvalidLanguageError


class SupportedLanguage(Enum):
    """Закрытый набор языков плюс служебное значение AUTO."""

    AUTO = "auto"
    EN = "en"
    RU = "ru"
    UA = "ua"

    @classmethod
    def concrete(cls) -> List["SupportedLanguage"]:
        """Возвращает конкретные языки (без AUTO) в порядке объявления."""
        return [language for language in cls if language is not cls.AUTO]

    @classmethod
    def parse(cls, value: Union["SupportedLanguage", str]) -> "SupportedLanguage":
        """
        Приводит значение к члену перечисления.

        Args:
            value: Член перечисления или код языка ('en', 'RU', 'uk', 'auto')

        Returns:
            Член SupportedLanguage

        Raises:
            InvalidLanguageError: если значение не входит в реестр
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            code = value.strip().lower()
            # ISO 639-1 код украинского — 'uk'
            code = _ALIASES.get(code, code)
            for language in cls:
                if language.value == code:
                    return language
        raise InvalidLanguageError(value)

    @classmethod
    def parse_concrete(cls, value: Union["SupportedLanguage", str]) -> "SupportedLanguage":
        """Как parse(), но отклоняет AUTO: списки слов хранятся только для конкретных языков."""
        language = cls.parse(value)
        if language is cls.AUTO:
            raise InvalidLanguageError(value)
        return language


_ALIASES = {
    "uk": "ua",
    "eng": "en",
    "rus": "ru",
    "ukr": "ua",
}
