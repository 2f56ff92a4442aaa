"""Явная конфигурация клиента Docker Engine."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, replace
from typing import Final, Mapping, Optional

from lsdvol.docker_api.exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

DEFAULT_API_VERSION: Final[str] = "1.24"
DEFAULT_SOCKET_PATH: Final[str] = "/var/run/docker.sock"

API_VERSION_ENV: Final[str] = "LSDVOL_API_VERSION"
SOCKET_PATH_ENV: Final[str] = "LSDVOL_DOCKER_SOCKET"

_API_VERSION_PATTERN = re.compile(r"v?(\d+\.\d+)")


def normalize_api_version(value: str) -> str:
    """Приводит "v1.24" и "1.24" к виду "1.24"."""

    match = _API_VERSION_PATTERN.fullmatch(value.strip())
    if match is None:
        raise ConfigurationError(value, "is not a valid Remote API version")
    return match.group(1)


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Параметры подключения, создаются один раз при старте."""

    api_version: str = DEFAULT_API_VERSION
    default_socket_path: str = DEFAULT_SOCKET_PATH

    def with_overrides(
        self,
        *,
        api_version: Optional[str] = None,
        socket_path: Optional[str] = None,
    ) -> EngineSettings:
        """Возвращает копию с заменёнными значениями (флаги CLI)."""

        settings = self
        if api_version:
            settings = replace(settings, api_version=normalize_api_version(api_version))
        if socket_path:
            settings = replace(settings, default_socket_path=socket_path)
        return settings


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Собирает настройки из значений по умолчанию и переменных окружения."""

    env = os.environ if environ is None else environ
    settings = EngineSettings().with_overrides(
        api_version=env.get(API_VERSION_ENV),
        socket_path=env.get(SOCKET_PATH_ENV),
    )
    LOGGER.debug(
        "Settings loaded: api_version=%s socket=%s",
        settings.api_version,
        settings.default_socket_path,
    )
    return settings
