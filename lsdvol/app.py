"""Единая точка входа ядра: идентификатор -> список томов."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from lsdvol.docker_api.client import EngineClient
from lsdvol.docker_api.models import Volume
from lsdvol.identity.cgroup import detect_container_id
from lsdvol.settings.config import EngineSettings

LOGGER = logging.getLogger(__name__)


def lookup_volumes(
    container_id: str,
    settings: EngineSettings,
    socket_path: Optional[str] = None,
    *,
    raw_client: Any | None = None,
) -> List[Volume]:
    """Возвращает тома контейнера либо поднимает одно из исключений LsdvolError.

    Пустой идентификатор означает автоопределение по cgroup текущего процесса.
    """

    if not container_id:
        container_id = detect_container_id()
        LOGGER.info("Detected running container id %s", container_id)
    with EngineClient(settings, socket_path, raw_client=raw_client) as client:
        return client.volumes_for(container_id)
