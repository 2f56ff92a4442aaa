"""Иерархия ошибок поиска томов контейнера."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class LsdvolError(Exception):
    """Базовое исключение lsdvol с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, записывая их в debug лог."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.debug("%s | context=%s", message, self.context)


class ConfigurationError(LsdvolError):
    """Путь к сокету отсутствует, не является сокетом или настройка некорректна."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path} {reason}", context={"path": path, "reason": reason})


class CompatibilityError(LsdvolError):
    """Docker Engine не поддерживает версию Remote API клиента."""

    def __init__(self, api_version: str) -> None:
        self.api_version = api_version
        super().__init__(
            f"Docker Engine not compatible with Remote API version v{api_version}",
            context={"api_version": api_version},
        )


class TransportError(LsdvolError):
    """Сбой соединения с сокетом Docker."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Docker socket transport failure: {reason}", context={"reason": reason})


class ProtocolError(LsdvolError):
    """Ответ Docker Engine не соответствует ожидаемой схеме."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unexpected Docker Engine response: {reason}", context={"reason": reason})


class NotFoundError(LsdvolError):
    """Контейнер с указанным идентификатором не найден."""

    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        super().__init__(
            f"No container with id {container_id} was found.",
            context={"container_id": container_id},
        )


class ResolutionError(LsdvolError):
    """Не удалось определить идентификатор текущего контейнера."""

    def __init__(self, reason: Optional[str] = None) -> None:
        self.reason = reason
        message = "unable to determine running container id"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, context={"reason": reason})
