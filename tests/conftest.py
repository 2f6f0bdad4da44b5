from pathlib import Path

import pytest

from text_tokenizer import Tokenizer
from text_tokenizer.components.stop_words import NoStopWords


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов на поддерживаемых языках для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_ENGLISH_TEXT,
        SAMPLE_RUSSIAN_TEXT,
        SAMPLE_UKRAINIAN_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "en": SAMPLE_ENGLISH_TEXT,
        "ru": SAMPLE_RUSSIAN_TEXT,
        "ua": SAMPLE_UKRAINIAN_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


@pytest.fixture
def stub_stop_words():
    """Заглушка поставщика стоп-слов с фиксированными списками."""
    from .utils.stub_stop_words import StubStopWords

    return StubStopWords({
        "en": ["the", "and", "of"],
        "ru": ["это", "как"],
    })


@pytest.fixture
def tokenizer() -> Tokenizer:
    """Токенизатор без встроенных стоп-слов: фильтруют только явные списки."""
    return Tokenizer(stop_words=NoStopWords())


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
