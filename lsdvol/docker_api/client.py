"""Клиент Docker Engine поверх unix сокета с проверкой при создании."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import docker
import requests
from docker.errors import APIError, DockerException, InvalidVersion, NotFound

from lsdvol.docker_api.exceptions import (
    CompatibilityError,
    ConfigurationError,
    LsdvolError,
    NotFoundError,
    ProtocolError,
    TransportError,
)
from lsdvol.docker_api.models import Volume
from lsdvol.docker_api.volumes import extract_volumes
from lsdvol.settings.config import EngineSettings
from lsdvol.utils.helpers import is_socket, normalize_socket_path, strip_socket_scheme

LOGGER = logging.getLogger(__name__)


class EngineClient:
    """Проверенный канал к Docker Engine, пригодный только для чтения.

    Конструктор проверяет сокет и совместимость версии API; клиент, не
    прошедший проверки, не создаётся.
    """

    def __init__(
        self,
        settings: EngineSettings,
        socket_path: str | None = None,
        raw_client: Any | None = None,
    ) -> None:
        self.settings = settings
        self.socket_path = strip_socket_scheme(socket_path or settings.default_socket_path)
        self._validate_socket()
        self._client = raw_client or self._create_client()  # docker.APIClient
        try:
            self._check_compatibility()
        except LsdvolError:
            self.close()
            raise

    def __enter__(self) -> EngineClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _validate_socket(self) -> None:
        try:
            socket_ok = is_socket(self.socket_path)
        except FileNotFoundError as exc:
            raise ConfigurationError(self.socket_path, "does not exist") from exc
        except OSError as exc:
            raise ConfigurationError(self.socket_path, f"cannot be inspected: {exc}") from exc
        if not socket_ok:
            raise ConfigurationError(self.socket_path, "is not a socket")

    def _create_client(self) -> Any:
        base_url = normalize_socket_path(self.socket_path)
        try:
            return docker.APIClient(base_url=base_url, version=self.settings.api_version)
        except InvalidVersion as exc:
            # docker SDK не работает с версиями API ниже своего минимума
            LOGGER.debug("Docker SDK rejected API v%s: %s", self.settings.api_version, exc)
            raise CompatibilityError(self.settings.api_version) from exc
        except DockerException as exc:
            LOGGER.error("Docker client init error via %s: %s", base_url, exc)
            raise TransportError(str(exc)) from exc

    def _check_compatibility(self) -> None:
        # Совместимость определяется только кодом 200, тело ответа не разбирается
        url = f"{self._client.base_url}/v{self.settings.api_version}/info"
        try:
            response = self._client.get(url)
        except (requests.exceptions.RequestException, DockerException) as exc:
            raise TransportError(str(exc)) from exc
        status_code = response.status_code
        response.close()
        if status_code != 200:
            LOGGER.debug("Info probe %s answered with HTTP %s", url, status_code)
            raise CompatibilityError(self.settings.api_version)
        LOGGER.debug(
            "Docker Engine at %s accepts API v%s", self.socket_path, self.settings.api_version
        )

    def inspect_container(self, container_id: str) -> Dict[str, Any]:
        """Запрашивает полный документ метаданных контейнера."""

        try:
            return self._client.inspect_container(container_id)
        except NotFound as exc:
            raise NotFoundError(container_id) from exc
        except APIError as exc:
            raise ProtocolError(str(exc)) from exc
        except ValueError as exc:
            # requests.JSONDecodeError наследует и ValueError, и RequestException
            raise ProtocolError(f"response body is not valid JSON: {exc}") from exc
        except (requests.exceptions.RequestException, DockerException) as exc:
            raise TransportError(str(exc)) from exc

    def volumes_for(self, container_id: str) -> List[Volume]:
        """Возвращает тома контейнера; порядок не определён."""

        volumes = extract_volumes(self.inspect_container(container_id))
        LOGGER.info("Container %s has %d volume(s)", container_id, len(volumes))
        return volumes

    def close(self) -> None:
        """Закрывает HTTP сессию клиента."""

        close = getattr(self._client, "close", None)
        if callable(close):
            close()
