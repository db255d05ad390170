"""CLI principal de httpeek.

Comandos:
- get: envía un GET a una URL
- post: envía un POST con cuerpo JSON construido con pares key=value

Flujo lineal: parse -> cliente -> una petición -> render -> salida.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from adapters.dispatcher import dispatch
from adapters.http_client import build_async_client
from cli.renderer import render_response
from core import __version__
from core.config import AppSettings
from core.domain.models import Command, GetCommand, Pair, PostCommand, ResponseView
from core.errors import HttpeekError, InvalidArgumentError
from core.parsing import parse_pairs, parse_url

app = typer.Typer(
    name="httpeek",
    help="Send one HTTP request and pretty-print the response.",
    no_args_is_help=True,
)

_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"httpeek {__version__}")
        raise typer.Exit()


def _url_callback(value: str) -> str:
    try:
        return parse_url(value)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _pairs_callback(value: list[str] | None) -> list[Pair]:
    try:
        return parse_pairs(value or [])
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc


async def _send(command: Command, settings: AppSettings) -> ResponseView:
    async with build_async_client(settings) as client:
        return await dispatch(command, client)


def _execute(command: Command, *, no_color: bool, strict_json: bool) -> None:
    console = Console(no_color=no_color, highlight=False)
    try:
        settings = AppSettings()
        view = asyncio.run(_send(command, settings))
        render_response(view, console, indent=settings.json_indent, strict_json=strict_json)
    except (httpx.HTTPError, HttpeekError, ValidationError) as exc:
        detail = str(exc) or type(exc).__name__
        _err_console.print(Text.assemble(("Error: ", "bold red"), detail), soft_wrap=True)
        raise typer.Exit(1) from exc


NoColorOption = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output"),
]
StrictJsonOption = Annotated[
    bool,
    typer.Option("--strict-json", help="Fail when a JSON response body cannot be parsed"),
]


@app.command()
def get(
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL to request", callback=_url_callback),
    ],
    no_color: NoColorOption = False,
    strict_json: StrictJsonOption = False,
) -> None:
    """Send a GET request and print status, headers and body.

    Example:
        httpeek get https://httpbin.org/get
    """
    _execute(GetCommand(url=url), no_color=no_color, strict_json=strict_json)


@app.command()
def post(
    url: Annotated[
        str,
        typer.Argument(help="Absolute URL to request", callback=_url_callback),
    ],
    pairs: Annotated[
        list[str] | None,
        typer.Argument(help="Body fields as key=value", callback=_pairs_callback, show_default=False),
    ] = None,
    no_color: NoColorOption = False,
    strict_json: StrictJsonOption = False,
) -> None:
    """Send a POST request with a JSON body built from key=value pairs.

    Example:
        httpeek post https://httpbin.org/post name=ada lang=python
    """
    # `pairs` already holds Pair objects: the callback parsed the tokens.
    command = PostCommand(url=url, pairs=pairs or [])
    _execute(command, no_color=no_color, strict_json=strict_json)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log request details to stderr."),
    ] = False,
) -> None:
    """Send one HTTP request and pretty-print the response."""
    configure_logging(verbose)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
