"""Извлечение томов из метаданных контейнера."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError

from lsdvol.docker_api.exceptions import ProtocolError
from lsdvol.docker_api.models import ContainerMetadata, Volume


def parse_metadata(document: Any) -> ContainerMetadata:
    """Проверяет документ по схеме, лишние поля игнорируются."""

    try:
        return ContainerMetadata.model_validate(document)
    except ValidationError as exc:
        raise ProtocolError(
            f"container metadata does not match schema ({exc.error_count()} errors)"
        ) from exc


def extract_volumes(document: Any) -> List[Volume]:
    """Возвращает тома контейнера, по одному на каждый путь.

    Старые версии API отдают словарь VolumesRW (путь -> доступ на запись),
    новые только список Mounts. VolumesRW имеет приоритет, если присутствует.
    """

    metadata = parse_metadata(document)
    writable_by_path: Dict[str, bool] = {}
    if metadata.volumes_rw is not None:
        writable_by_path.update(metadata.volumes_rw)
    elif metadata.mounts:
        for mount in metadata.mounts:
            writable_by_path[mount.destination] = mount.rw
    return [Volume(path=path, writable=writable) for path, writable in writable_by_path.items()]
