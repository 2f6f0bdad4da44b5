"""
Компонент для наивного определения языка по частоте букв.

Для каждого языка выбрана одна буква, типичная частота которой в текстах
на этом языке лежит в диапазоне 2%-5% (по таблицам частотности букв).
Оценка языка — число вхождений этой буквы в текст.
Чтобы добавить язык, достаточно добавить его в реестр и сюда.
"""

from typing import Dict, Mapping, Optional
import logging

from ..languages import SupportedLanguage

logger = logging.getLogger(__name__)

CHARACTERISTIC_LETTERS: Dict[SupportedLanguage, str] = {
    SupportedLanguage.EN: 'y',
    SupportedLanguage.RU: 'ы',
    SupportedLanguage.UA: 'і',
}


class LetterFrequencyDetector:
    """Определяет язык по количеству характерных букв."""

    def __init__(self, letters: Optional[Mapping[SupportedLanguage, str]] = None):
        """
        Args:
            letters: Характерные буквы по языкам (по умолчанию CHARACTERISTIC_LETTERS)
        """
        self.letters = dict(letters or CHARACTERISTIC_LETTERS)

    def score(self, text: str) -> Dict[SupportedLanguage, int]:
        """
        Считает оценки всех конкретных языков.

        Returns:
            Словарь {язык: оценка} в порядке реестра
        """
        lowered = (text or '').lower()
        scores = {}
        for language in SupportedLanguage.concrete():
            letter = self.letters.get(language)
            scores[language] = lowered.count(letter) if letter else 0
        return scores

    def detect(self, text: str) -> SupportedLanguage:
        """
        Определяет наиболее вероятный язык.

        При равных оценках побеждает язык, объявленный в реестре раньше,
        поэтому текст без характерных букв определяется как первый язык (EN).
        """
        scores = self.score(text)
        # max() возвращает первый из равных максимумов
        detected = max(scores, key=scores.get)
        readable = {lang.value: s for lang, s in scores.items()}
        logger.debug(f"Оценки языков: {readable}")
        return detected
