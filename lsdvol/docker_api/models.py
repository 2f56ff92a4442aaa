"""Структуры данных для описания томов контейнера."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


@dataclass(frozen=True, slots=True)
class Volume:
    """Точка монтирования внутри контейнера."""

    path: str  # абсолютный путь внутри контейнера
    writable: bool

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует том в словарь для JSON вывода."""

        return {"path": self.path, "writable": self.writable}


class MountPoint(BaseModel):
    """Элемент списка Mounts (Remote API 1.20+)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    destination: StrictStr = Field(alias="Destination")
    rw: StrictBool = Field(alias="RW")


class ContainerMetadata(BaseModel):
    """Часть ответа /containers/<id>/json, нужная для списка томов."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    volumes_rw: Optional[Dict[StrictStr, StrictBool]] = Field(default=None, alias="VolumesRW")
    mounts: Optional[List[MountPoint]] = Field(default=None, alias="Mounts")
