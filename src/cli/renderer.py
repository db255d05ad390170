"""Render de la respuesta en consola (Rich).

Por qué separar el render:
- Evita mezclar lógica de comandos con detalles visuales.
- Trabaja sobre `ResponseView`, así que se prueba sin red.

Los valores de cabecera y los cuerpos no JSON se escriben tal cual en
`console.file`; nunca se interpreta markup de Rich que venga en la respuesta.
"""

from __future__ import annotations

import json
import logging
import math
from decimal import Decimal

from rich.console import Console
from rich.text import Text

from core.domain.models import ResponseView
from core.errors import ResponseFormatError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def content_type_essence(value: str | None) -> str | None:
    """Devuelve `type/subtype` en minúsculas, sin parámetros (`; charset=...`)."""

    if not value:
        return None
    essence = value.split(";", 1)[0].strip().lower()
    return essence or None


def is_json_content_type(value: str | None) -> bool:
    return content_type_essence(value) == JSON_MEDIA_TYPE


def _exact_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value) or Decimal(literal) != Decimal(repr(value)):
        raise ValueError(f"number {literal} does not fit a float exactly")
    return value


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not a JSON value")


def pretty_json(text: str, *, indent: int = 2) -> str:
    """Re-formatea `text` con indentación sin alterar su valor.

    Números que un float no representa exactamente (`1e400`, más de 17
    dígitos) y las constantes `NaN`/`Infinity` se rechazan.
    """

    try:
        data = json.loads(text, parse_float=_exact_float, parse_constant=_reject_constant)
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except (ValueError, RecursionError) as exc:
        raise ResponseFormatError(f"Response declared {JSON_MEDIA_TYPE} but body is not valid JSON: {exc}") from exc


def format_body(view: ResponseView, *, indent: int = 2, strict_json: bool = False) -> tuple[str, bool]:
    """Texto final del cuerpo y si se re-formateó como JSON.

    Un JSON inválido se imprime tal cual salvo con `strict_json`.
    """

    if not is_json_content_type(view.content_type):
        return view.body, False

    try:
        return pretty_json(view.body, indent=indent), True
    except ResponseFormatError as exc:
        if strict_json:
            raise
        logger.warning("%s; printing it unchanged", exc)
        return view.body, False


def render_status(view: ResponseView, console: Console) -> None:
    console.print(Text(view.status_line, style="blue"), soft_wrap=True)
    console.print()


def write_raw(console: Console, text: str) -> None:
    """Escribe `text` sin pasar por Rich: tabs, `\\r` y otros controles llegan intactos."""

    console.file.write(text)
    console.file.flush()


def render_headers(view: ResponseView, console: Console) -> None:
    for name, value in view.headers:
        console.print(Text(name, style="green"), end="", soft_wrap=True)
        write_raw(console, f": {value}\n")
    console.print()


def render_response(
    view: ResponseView,
    console: Console,
    *,
    indent: int = 2,
    strict_json: bool = False,
) -> None:
    """Imprime línea de estado, cabeceras y cuerpo, en ese orden."""

    # El cuerpo se formatea antes de imprimir nada: con --strict-json no queda salida parcial.
    body, is_json = format_body(view, indent=indent, strict_json=strict_json)

    render_status(view, console)
    render_headers(view, console)
    if is_json:
        console.print(Text(body, style="cyan"), soft_wrap=True)
    else:
        write_raw(console, body + "\n")
