"""Различные вспомогательные функции."""

from __future__ import annotations

import os
import stat

_UNIX_SCHEME = "unix://"


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    if value.lower().startswith(_UNIX_SCHEME):
        return value
    return f"{_UNIX_SCHEME}{value}"


def strip_socket_scheme(raw_value: str) -> str:
    """Возвращает путь файловой системы без префикса unix://."""

    value = raw_value.strip()
    if value.lower().startswith(_UNIX_SCHEME):
        return value[len(_UNIX_SCHEME):]
    return value


def is_socket(path: str) -> bool:
    """Проверяет, что путь указывает на сокет (символические ссылки разыменовываются)."""

    return stat.S_ISSOCK(os.stat(path).st_mode)
