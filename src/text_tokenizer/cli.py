#!/usr/bin/env python3
"""
Интерфейс командной строки для Text Tokenizer

Тонкая обёртка над Tokenizer: читает текст из файла или stdin,
запускает пайплайн и печатает пары value(count).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config, config as default_config
from .exceptions import TokenizerError
from .languages import SupportedLanguage
from .tokenizer import Tokenizer


def build_parser() -> argparse.ArgumentParser:
    """Создаёт парсер аргументов"""
    parser = argparse.ArgumentParser(
        prog="text_tokenizer",
        description="Text Tokenizer - ранжированный список токенов текста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m text_tokenizer.cli article.txt                 # Все токены
  python -m text_tokenizer.cli page.html --html --top 20   # 20 самых частых слов страницы
  cat notes.txt | python -m text_tokenizer.cli --separator _ --stop-word en:foo
        """
    )
    parser.add_argument('file', nargs='?', help='Файл с текстом (по умолчанию stdin)')
    parser.add_argument('--html', action='store_true', help='Входные данные - HTML')
    parser.add_argument('--top', type=int, default=None, help='Вывести только N самых частых токенов')
    parser.add_argument('--min-length', type=int, default=None, help='Минимальная длина токена')
    parser.add_argument('--max-length', type=int, default=None, help='Максимальная длина токена')
    parser.add_argument('--separator', action='append', default=[], metavar='CH',
                        help='Дополнительный символ-разделитель (можно повторять)')
    parser.add_argument('--stop-word', action='append', default=[], metavar='LANG:WORD',
                        help='Слово в чёрный список языка, например en:foo (можно повторять)')
    parser.add_argument('--ignore-digits', action='store_true', help='Отбрасывать токены только из цифр')
    parser.add_argument('--table', action='store_true', help='Вывести таблицу value/count/share')
    parser.add_argument('--config', default=None, help='Путь к config.yaml')
    return parser


def _read_input(path: Optional[str]) -> str:
    if path:
        return Path(path).read_text(encoding='utf-8')
    return sys.stdin.read()


def _configure(tokenizer: Tokenizer, args: argparse.Namespace) -> None:
    if args.min_length is not None:
        tokenizer.set_token_min_length(args.min_length)
    if args.max_length is not None:
        tokenizer.set_token_max_length(args.max_length)
    if args.ignore_digits:
        tokenizer.ignore_digits = True
    for separator in args.separator:
        tokenizer.add_symbol_separator(separator)
    for item in args.stop_word:
        language, _, word = item.partition(':')
        if not word:
            raise ValueError(f"Ожидается LANG:WORD, получено {item!r}")
        tokenizer.add_word_to_blacklist(SupportedLanguage.parse(language), word)


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    args = build_parser().parse_args(argv)

    settings = Config(config_path=args.config) if args.config else default_config
    settings._configure_logging_if_needed()

    tokenizer = Tokenizer(settings=settings)
    try:
        _configure(tokenizer, args)
        data = _read_input(args.file)
        if args.html:
            tokenizer.load_html(data)
        else:
            tokenizer.load_text(data)
    except (OSError, ValueError, TokenizerError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    tokenizer.tokenize()

    top = args.top if args.top is not None else settings.get_top_tokens_default()
    if args.table:
        print(tokenizer.get_frequency_table(top or None).to_string(index=False))
    elif top:
        tokenizer.print_top_tokens(top)
        print()
    else:
        tokenizer.print_tokens()
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
