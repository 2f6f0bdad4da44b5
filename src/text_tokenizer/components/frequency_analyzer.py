"""
Компонент для подсчёта и ранжирования токенов.

Каждый вызов count_frequency() начинает подсчёт заново: результаты
предыдущего прогона отбрасываются, накопления между прогонами нет.
"""

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional

from ..interfaces.tokenizer import Token


class FrequencyAnalyzer:
    """Агрегатор и ранжировщик токенов."""

    def __init__(self):
        self._tokens: List[Token] = []
        self._ranked: Optional[List[Token]] = None
        self._total_words = 0

    def count_frequency(self, words: Iterable[str]) -> Dict[str, int]:
        """
        Подсчитывает вхождения и создаёт по одному Token на уникальное слово.

        Args:
            words: Принятые нормализованные кандидаты

        Returns:
            Словарь {слово: количество}
        """
        raw_tokens = Counter(words)
        self._tokens = [Token(value, count) for value, count in raw_tokens.items()]
        self._total_words = sum(raw_tokens.values())
        self._ranked = None
        return dict(raw_tokens)

    def get_ranked(self, descending: bool = True) -> List[Token]:
        """
        Возвращает все токены, упорядоченные по частоте.

        Ничьи разрешаются по значению токена по возрастанию
        в обоих направлениях сортировки.
        """
        if self._ranked is None:
            self._ranked = sorted(self._tokens, key=lambda t: (-t.count, t.value))
        if descending:
            return list(self._ranked)
        return sorted(self._tokens, key=lambda t: (t.count, t.value))

    def get_most_frequent(self, n: int) -> List[Token]:
        """
        Возвращает n самых частых токенов.

        Args:
            n: Количество токенов; n <= 0 даёт пустой список
        """
        if n <= 0:
            return []
        return self.get_ranked()[:n]

    def get_frequency_statistics(self) -> Dict[str, int]:
        """
        Возвращает общую статистику последнего прогона.

        Returns:
            Словарь со статистикой
        """
        return {
            'total_words': self._total_words,
            'unique_words': len(self._tokens),
        }

    def get_frequency_distribution(self) -> Dict[int, int]:
        """
        Возвращает распределение слов по частоте.

        Returns:
            Словарь {частота: количество слов}
        """
        distribution = defaultdict(int)
        for token in self._tokens:
            distribution[token.count] += 1
        return dict(distribution)
