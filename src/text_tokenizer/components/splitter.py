"""
Компонент для разбиения текста на кандидаты в токены.

Отвечает за разбивку текста по набору символов-разделителей,
фильтрацию по длине и приведение к нижнему регистру.
"""

import re
from typing import Iterable, List, Optional
from ..interfaces.tokenizer import SplitterInterface

# Порядок важен только для читаемости: хранится как множество
DEFAULT_SEPARATORS = (
    ' ', '\t', '+', '-', '/', '*', '~', '@', '#', '%', '^',
    '=', '<', '>', '!',
    ',', '.', ':', ';', '_',
    '$', '€', '£', '&', '?', '|', '\\', '\'', '"', '§', '°',
    '(', ')', '{', '}', '[', ']',
)


class SymbolSplitter(SplitterInterface):
    """Разбивает текст по символам-разделителям и нормализует фрагменты."""

    def __init__(self, min_length: int = 2, max_length: int = 25,
                 ignore_digits: bool = False,
                 separators: Optional[Iterable[str]] = None):
        """
        Инициализирует сплиттер.

        Args:
            min_length: Минимальная длина токена (включительно)
            max_length: Максимальная длина токена (включительно)
            ignore_digits: Отбрасывать ли фрагменты только из цифр
            separators: Дополнительные разделители к встроенному набору
        """
        self.min_length = min_length
        self.max_length = max_length
        self.ignore_digits = ignore_digits
        self._separators = set(DEFAULT_SEPARATORS)
        self._pattern: Optional[re.Pattern] = None
        for separator in separators or ():
            self.add_separator(separator)

    @property
    def separators(self) -> frozenset:
        return frozenset(self._separators)

    def add_separator(self, separator: str) -> bool:
        """
        Добавляет символ-разделитель.

        Args:
            separator: Ровно один символ

        Returns:
            True если разделитель добавлен, False если он уже был в наборе
        """
        if not isinstance(separator, str) or len(separator) != 1:
            raise ValueError(f"Разделитель должен быть одним символом: {separator!r}")
        if separator in self._separators:
            return False
        self._separators.add(separator)
        self._pattern = None
        return True

    def _get_pattern(self) -> re.Pattern:
        if self._pattern is None:
            escaped = ''.join(re.escape(ch) for ch in sorted(self._separators))
            self._pattern = re.compile(f"[{escaped}]+")
        return self._pattern

    def split(self, text: str) -> List[str]:
        """
        Разбивает текст на фрагменты.

        Args:
            text: Исходный текст

        Returns:
            Список непустых фрагментов в порядке появления
        """
        if not text:
            return []
        return [fragment for fragment in self._get_pattern().split(text) if fragment]

    def normalize(self, fragment: str) -> Optional[str]:
        """
        Нормализует фрагмент.

        Args:
            fragment: Фрагмент после разбиения

        Returns:
            Фрагмент в нижнем регистре или None, если он не проходит фильтры
        """
        candidate = fragment.strip().lower()
        if not self.is_valid_token(candidate):
            return None
        return candidate

    def is_valid_token(self, token: str) -> bool:
        """
        Проверяет длину и (опционально) отсутствие чисто цифрового токена.

        Длина проверяется уже после lower(): для некоторых символов
        (например, 'İ') нижний регистр длиннее исходного.
        """
        if not token:
            return False
        if len(token) < self.min_length or len(token) > self.max_length:
            return False
        if self.ignore_digits and token.isdigit():
            return False
        return True

    def iter_candidates(self, text: str) -> Iterable[str]:
        """Возвращает нормализованные кандидаты, прошедшие фильтры длины."""
        for fragment in self.split(text):
            candidate = self.normalize(fragment)
            if candidate is not None:
                yield candidate
