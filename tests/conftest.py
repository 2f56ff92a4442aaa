"""Общие фикстуры: unix сокеты и поддельный Docker Engine."""

from __future__ import annotations

import json
import shutil
import socket
import socketserver
import tempfile
import threading
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

import pytest


@pytest.fixture
def short_tmp() -> Iterator[Path]:
    """Короткий каталог: путь unix сокета ограничен ~108 байтами."""

    directory = Path(tempfile.mkdtemp(prefix="lsdvol-"))
    yield directory
    shutil.rmtree(directory, ignore_errors=True)


@pytest.fixture
def socket_path(short_tmp: Path) -> Iterator[Path]:
    """Сокет, который существует, но не принимает соединения."""

    path = short_tmp / "docker.sock"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    sock.bind(str(path))
    yield path
    sock.close()


class EngineHandler(BaseHTTPRequestHandler):
    """Отвечает заранее заданными ответами по пути запроса."""

    server: "FakeEngineServer"

    def do_GET(self) -> None:  # noqa: N802
        self.server.requested.append(self.path)
        status, body = self.server.routes.get(
            self.path, (404, b'{"message": "page not found"}')
        )
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        return None


class FakeEngineServer(socketserver.ThreadingUnixStreamServer):
    daemon_threads = True

    def __init__(self, path: Path) -> None:
        self.routes: Dict[str, Tuple[int, bytes]] = {}
        self.requested: list[str] = []
        super().__init__(str(path), EngineHandler)

    def route(self, path: str, status: int, body: Any) -> None:
        payload = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.routes[path] = (status, payload)


@pytest.fixture
def engine(short_tmp: Path) -> Iterator[FakeEngineServer]:
    """Настоящий HTTP сервер на unix сокете, отвечающий на /v1.24/info."""

    server = FakeEngineServer(short_tmp / "engine.sock")
    server.route("/v1.24/info", 200, {"ID": "engine", "Containers": 1})
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def container_id() -> str:
    return "4f3c2b1a" * 8
