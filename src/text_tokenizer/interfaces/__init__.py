"""
Интерфейсы для компонентов токенизатора.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .tokenizer import (
    Token,
    TokenizerInterface,
    SplitterInterface,
    StopWordProviderInterface,
    HtmlExtractorInterface,
)

__all__ = [
    'Token',
    'TokenizerInterface',
    'SplitterInterface',
    'StopWordProviderInterface',
    'HtmlExtractorInterface',
]
