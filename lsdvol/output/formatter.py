"""Текстовое представление списка томов."""

from __future__ import annotations

import json
from typing import Iterable, List

from lsdvol.docker_api.models import Volume


def render_plain(volumes: Iterable[Volume]) -> str:
    """Один путь на строку."""

    return "".join(f"{volume.path}\n" for volume in volumes)


def render_long(volumes: Iterable[Volume]) -> str:
    """Заголовок с количеством и строки вида ``rw  /path``."""

    items = list(volumes)
    lines: List[str] = [f"{len(items)} volume(s)"]
    for volume in items:
        mode = "rw" if volume.writable else "r"
        lines.append(f"{mode}  {volume.path}")
    return "\n".join(lines) + "\n"


def render_json(volumes: Iterable[Volume]) -> str:
    """JSON массив объектов ``{"path": ..., "writable": ...}``."""

    return json.dumps([volume.to_dict() for volume in volumes]) + "\n"
