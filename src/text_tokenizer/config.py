"""
Модуль для работы с конфигурацией токенизатора

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TEXT_TOKENIZER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = 'TEXT_TOKENIZER_'
ENV_PROFILE = 'TEXT_TOKENIZER_ENV'


class Config:
    """Класс для работы с конфигурацией токенизатора"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"
            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")

    # --- Загрузка ---
    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    logger.warning(
                        f"Файл конфигурации {self.config_path} не содержит словарь "
                        f"({type(loaded).__name__}), используются значения по умолчанию"
                    )
                    return
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        if load_dotenv():
            logger.info("Переменные окружения загружены из .env")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TEXT_TOKENIZER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет диапазоны длин токенов."""
        for key, fallback in (('tokenizer.min_length', 2), ('tokenizer.max_length', 25)):
            try:
                value = int(self.get(key, fallback))
            except (TypeError, ValueError):
                logger.warning(f"{key} не является числом — используется {fallback}")
                value = fallback
            if value < 1:
                logger.warning(f"{key} < 1 — принудительно установлено в 1")
                value = 1
            self._set_nested(self.config_data, key, value)
        # Согласование min/max — ответственность вызывающего кода
        if self.get_min_token_length() > self.get_max_token_length():
            logger.warning("tokenizer.min_length больше tokenizer.max_length: токенов не будет")

    # --- Логирование ---
    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        level_name = str(self.get_logging_level()).upper()
        level = getattr(logging, level_name, logging.INFO)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_text_tokenizer_configured", False) and not force:
            if (
                getattr(root, "_text_tokenizer_level", None) == level_name and
                getattr(root, "_text_tokenizer_format", None) == desired_fmt and
                getattr(root, "_text_tokenizer_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        # Логи идут в stderr, чтобы не смешиваться с выводом токенов
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        logging.basicConfig(level=level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_text_tokenizer_configured", True)
        setattr(root, "_text_tokenizer_level", level_name)
        setattr(root, "_text_tokenizer_format", desired_fmt)
        setattr(root, "_text_tokenizer_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy(_DEFAULT_CONFIG)

    # --- Доступ к значениям ---
    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_min_token_length(self) -> int:
        """Получает минимальную длину токена"""
        return int(self.get('tokenizer.min_length', 2))

    def get_max_token_length(self) -> int:
        """Получает максимальную длину токена"""
        return int(self.get('tokenizer.max_length', 25))

    def is_ignore_digits_enabled(self) -> bool:
        """Отбрасывать ли фрагменты, состоящие только из цифр"""
        return bool(self.get('tokenizer.ignore_digits', False))

    def get_extra_separators(self) -> List[str]:
        """Дополнительные разделители поверх встроенного набора"""
        separators = self.get('tokenizer.extra_separators', []) or []
        if isinstance(separators, str):
            return list(separators)
        return [str(s) for s in separators]

    def get_default_language(self) -> str:
        """Язык, с которого стартует экземпляр (по умолчанию auto)"""
        return str(self.get('tokenizer.language', 'auto'))

    def is_default_stop_words_enabled(self) -> bool:
        """Подмешивать ли встроенные стоп-слова определённого языка"""
        return bool(self.get('tokenizer.use_default_stop_words', True))

    def get_html_parser(self) -> str:
        """Получает имя парсера BeautifulSoup"""
        return str(self.get('html.parser', 'html.parser'))

    def get_top_tokens_default(self) -> int:
        """Количество токенов для вывода в CLI по умолчанию"""
        return int(self.get('output.top', 0))

    def get_logging_level(self) -> str:
        """Получает уровень логирования"""
        return self.get('logging.level', "WARNING")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        return self.get('logging.log_file', "logs/text_tokenizer.log")


_DEFAULT_CONFIG: Dict[str, Any] = {
    'tokenizer': {
        'min_length': 2,
        'max_length': 25,
        'ignore_digits': False,
        'extra_separators': [],
        'language': 'auto',
        'use_default_stop_words': True,
    },
    'html': {
        # 'html.parser' встроен в Python, 'lxml' быстрее на больших документах
        'parser': 'html.parser',
    },
    'output': {
        # 0 = выводить все токены
        'top': 0,
    },
    'logging': {
        'level': "WARNING",
        'format': "%(asctime)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_file': "logs/text_tokenizer.log",
    },
}


# Глобальный экземпляр конфигурации
config = Config()
