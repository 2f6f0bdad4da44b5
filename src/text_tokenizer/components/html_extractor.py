"""
Компонент для извлечения видимого текста из HTML.

Использует BeautifulSoup: элементы script и style удаляются из дерева
целиком, остальной текст склеивается без добавления разделителей,
как это делает innerText DOM-узла.
"""

from typing import Optional
import logging

from bs4 import BeautifulSoup

from ..exceptions import HtmlParseError
from ..interfaces.tokenizer import HtmlExtractorInterface

logger = logging.getLogger(__name__)

INVISIBLE_TAGS = ["script", "style"]


class HtmlTextExtractor(HtmlExtractorInterface):
    """Извлекает видимый текст документа."""

    def __init__(self, parser: Optional[str] = None):
        """
        Args:
            parser: Парсер BeautifulSoup ('html.parser', 'lxml', ...)
        """
        self.parser = parser or "html.parser"

    def extract_text(self, markup: str) -> str:
        """
        Разбирает разметку и возвращает видимый текст.

        Args:
            markup: HTML-документ или фрагмент

        Returns:
            Текст без содержимого script/style

        Raises:
            HtmlParseError: если разметку не удалось разобрать
        """
        if markup is None:
            return ""
        try:
            soup = BeautifulSoup(markup, self.parser)
        except Exception as e:
            logger.error(f"Ошибка разбора HTML ({self.parser}): {e}")
            raise HtmlParseError(f"Не удалось разобрать HTML: {e}") from e

        removed = 0
        for element in soup.find_all(INVISIBLE_TAGS):
            element.decompose()
            removed += 1
        if removed:
            logger.debug(f"Удалено невидимых элементов: {removed}")

        return soup.get_text()
