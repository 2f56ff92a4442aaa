"""Точка входа командной строки lsdvol."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from lsdvol import __version__
from lsdvol.app import lookup_volumes
from lsdvol.docker_api.exceptions import LsdvolError
from lsdvol.output.formatter import render_json, render_long, render_plain
from lsdvol.settings.config import load_settings
from lsdvol.utils.logger import configure_logging, get_logger

LOGGER = get_logger(__name__)

HELP = """Lists volumes in use by a Docker container.

If no ID or NAME is specified, the program is assumed to be executed from
within a container and the container ID will be autodetected.
"""

app = typer.Typer(
    name="lsdvol",
    help=HELP,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"lsdvol {__version__}")
        raise typer.Exit()


@app.command()
def main(
    container: Annotated[
        str, typer.Argument(metavar="[ID or NAME]", help="Container ID or name.")
    ] = "",
    long: Annotated[
        bool, typer.Option("-l", "--long", help="Output in detailed format.")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Output in JSON format.")] = False,
    docker_socket: Annotated[
        Optional[str],
        typer.Option("--docker-socket", help="Path to socket for Docker.", show_default=False),
    ] = None,
    api_version: Annotated[
        Optional[str],
        typer.Option("--api-version", help="Docker Remote API version.", show_default=False),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar="LSDVOL_LOG_LEVEL", help="Diagnostics level on stderr."),
    ] = "WARNING",
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help="Also write diagnostics to a rotating log file."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_print_version, is_eager=True, help="Print version and exit."
        ),
    ] = False,
) -> None:
    """Lists volumes in use by a Docker container."""

    try:
        configure_logging(level_name=log_level, log_file=log_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    try:
        settings = load_settings().with_overrides(api_version=api_version)
        volumes = lookup_volumes(container, settings, docker_socket)
    except LsdvolError as exc:
        LOGGER.debug("Lookup failed", exc_info=exc)
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc

    if long:
        typer.echo(render_long(volumes), nl=False)
    elif as_json:
        typer.echo(render_json(volumes), nl=False)
    else:
        typer.echo(render_plain(volumes), nl=False)


def run() -> None:
    """Запуск консольного скрипта."""

    app()


if __name__ == "__main__":
    run()
