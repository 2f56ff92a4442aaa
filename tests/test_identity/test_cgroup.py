"""Тесты автоопределения идентификатора контейнера."""

from __future__ import annotations

from pathlib import Path

import pytest

from lsdvol.docker_api.exceptions import ResolutionError
from lsdvol.identity.cgroup import detect_container_id

OTHER_ID = "0123456789abcdef" * 4


def write(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_cgroup_v1_line(tmp_path: Path, container_id: str) -> None:
    cgroup = write(
        tmp_path / "cgroup",
        "13:name=systemd:/",
        f"12:pids:/docker/{container_id}",
        f"11:memory:/docker/{OTHER_ID}",
    )
    assert detect_container_id(cgroup, None) == container_id


def test_systemd_scope_line(tmp_path: Path, container_id: str) -> None:
    cgroup = write(tmp_path / "cgroup", f"1:cpu:/system.slice/docker-{container_id}.scope")
    assert detect_container_id(cgroup, None) == container_id


def test_no_match_raises(tmp_path: Path) -> None:
    cgroup = write(tmp_path / "cgroup", "12:pids:/user.slice", "0::/")
    with pytest.raises(ResolutionError, match="unable to determine running container id"):
        detect_container_id(cgroup, None)


def test_uppercase_or_short_tokens_do_not_match(tmp_path: Path, container_id: str) -> None:
    cgroup = write(
        tmp_path / "cgroup",
        f"12:pids:/docker/{container_id.upper()}",
        f"11:memory:/docker/{container_id[:63]}",
    )
    with pytest.raises(ResolutionError):
        detect_container_id(cgroup, None)


def test_unreadable_cgroup_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ResolutionError, match="cannot read") as excinfo:
        detect_container_id(tmp_path / "missing", None)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_cgroup_v2_falls_back_to_mountinfo(tmp_path: Path, container_id: str) -> None:
    cgroup = write(tmp_path / "cgroup", "0::/")
    mountinfo = write(
        tmp_path / "mountinfo",
        f"600 500 0:52 / / rw,relatime - overlay overlay rw,upperdir=/var/lib/docker/overlay2/{OTHER_ID}/diff",
        f"620 600 8:1 /var/lib/docker/containers/{container_id}/hostname /etc/hostname rw - ext4 /dev/sda1 rw",
    )
    assert detect_container_id(cgroup, mountinfo) == container_id


def test_missing_mountinfo_keeps_generic_error(tmp_path: Path) -> None:
    cgroup = write(tmp_path / "cgroup", "0::/")
    with pytest.raises(ResolutionError) as excinfo:
        detect_container_id(cgroup, tmp_path / "no-mountinfo")
    assert excinfo.value.reason is None
