"""
Исключения пакета text_tokenizer.

Ядро пайплайна по возможности не бросает ошибок (слишком короткие токены,
пустой текст и повторные добавления обрабатываются молча). Исключения
возникают только на границе API.
"""


class TokenizerError(Exception):
    """Базовое исключение токенизатора."""


class InvalidLanguageError(TokenizerError, ValueError):
    """Язык не входит в закрытый реестр поддерживаемых языков."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Неподдерживаемый язык: {value!r}")


class HtmlParseError(TokenizerError):
    """Не удалось разобрать HTML-разметку."""
