"""
Компонент для вывода результатов токенизации.

Тонкая обёртка над уже посчитанным списком токенов: текстовый вывод
в поток и табличное представление через pandas. Файлы не пишутся.
"""

import sys
from typing import List, Optional, TextIO

import pandas as pd

from ..interfaces.tokenizer import Token

COLUMNS = ['value', 'count', 'share']


class TokenFormatter:
    """Форматирует токены как пары value(count)."""

    def format_tokens(self, tokens: List[Token]) -> str:
        """
        Склеивает токены в строку.

        Каждая пара завершается пробелом: "cat(2) dog(1) ".
        """
        return ''.join(f"{token} " for token in tokens)

    def write(self, tokens: List[Token], stream: Optional[TextIO] = None) -> None:
        """
        Пишет токены в поток (по умолчанию sys.stdout).

        Args:
            tokens: Токены в нужном порядке
            stream: Текстовый поток
        """
        stream = stream if stream is not None else sys.stdout
        stream.write(self.format_tokens(tokens))
        stream.flush()

    def to_dataframe(self, tokens: List[Token]) -> pd.DataFrame:
        """
        Строит таблицу токенов.

        Args:
            tokens: Токены в нужном порядке

        Returns:
            DataFrame с колонками value, count, share (доля среди переданных токенов)
        """
        if not tokens:
            return pd.DataFrame(columns=COLUMNS)

        df = pd.DataFrame(
            [{'value': token.value, 'count': token.count} for token in tokens]
        )
        df['share'] = df['count'] / df['count'].sum()
        return df[COLUMNS]
