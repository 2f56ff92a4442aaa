"""Вспомогательные функции для настройки логирования."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    try:
        return cast(int, getattr(logging, level_name.upper()))
    except AttributeError as exc:
        raise ValueError(f"Unknown log level: {level_name}") from exc


def configure_logging(
    *,
    level_name: str = "WARNING",
    log_file: Optional[Path] = None,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Направляет логи в stderr и, при необходимости, в файл с ротацией.

    stdout остаётся за выводом списка томов, поэтому консольный обработчик
    пишет только в stderr.
    """

    log_level = resolve_log_level(level_name)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [stream_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Удобная обёртка над logging.getLogger."""

    return logging.getLogger(name)
