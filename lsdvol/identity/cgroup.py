"""Определение идентификатора контейнера, внутри которого запущен процесс."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Final, Optional, Pattern

from lsdvol.docker_api.exceptions import ResolutionError

LOGGER = logging.getLogger(__name__)

CGROUP_PATH: Final[Path] = Path("/proc/self/cgroup")
MOUNTINFO_PATH: Final[Path] = Path("/proc/self/mountinfo")

CONTAINER_ID_PATTERN: Final[Pattern[str]] = re.compile(r"[a-f0-9]{64}")
# В mountinfo встречаются и идентификаторы слоёв overlay, поэтому ищем
# только каталог контейнера, откуда монтируются hostname и resolv.conf.
MOUNTINFO_ID_PATTERN: Final[Pattern[str]] = re.compile(r"/containers/([a-f0-9]{64})/")


def _scan(path: Path, pattern: Pattern[str]) -> Optional[str]:
    """Возвращает первое совпадение в файле, просматривая его построчно."""

    with path.open(encoding="utf-8", errors="replace") as handle:
        for line in handle:
            match = pattern.search(line)
            if match:
                return match.group(match.lastindex or 0)
    return None


def detect_container_id(
    cgroup_path: Path = CGROUP_PATH,
    mountinfo_path: Optional[Path] = MOUNTINFO_PATH,
) -> str:
    """Возвращает 64-символьный идентификатор текущего контейнера.

    Основной источник - записи cgroup. На хостах с cgroup v2 запись имеет
    вид ``0::/`` и идентификатора не содержит, тогда используется таблица
    монтирования. Ошибка чтения cgroup не маскируется общим сообщением.
    """

    try:
        container_id = _scan(cgroup_path, CONTAINER_ID_PATTERN)
    except OSError as exc:
        raise ResolutionError(f"cannot read {cgroup_path}: {exc}") from exc
    if container_id:
        LOGGER.debug("Container id %s found in %s", container_id, cgroup_path)
        return container_id

    if mountinfo_path is not None:
        try:
            container_id = _scan(mountinfo_path, MOUNTINFO_ID_PATTERN)
        except OSError as exc:
            LOGGER.debug("Mount table %s is not readable: %s", mountinfo_path, exc)
            container_id = None
        if container_id:
            LOGGER.debug("Container id %s found in %s", container_id, mountinfo_path)
            return container_id

    raise ResolutionError()
