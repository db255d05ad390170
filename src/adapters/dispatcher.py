"""Envío de la única petición de una invocación.

Los errores de red (DNS, conexión, TLS, protocolo) salen como
`httpx.HTTPError` sin reintentos; la CLI decide qué imprimir.
"""

from __future__ import annotations

import logging
from typing import Iterable

import httpx

from core.domain.models import Command, Pair, PostCommand, ResponseView

logger = logging.getLogger(__name__)


def build_json_body(pairs: Iterable[Pair]) -> dict[str, str]:
    """Construye el objeto JSON del POST. Con claves repetidas gana la última."""

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


def to_response_view(response: httpx.Response) -> ResponseView:
    return ResponseView(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=list(response.headers.multi_items()),
        content_type=response.headers.get("content-type"),
        body=response.text,
    )


async def dispatch(command: Command, client: httpx.AsyncClient) -> ResponseView:
    """Envía `command` con `client` y devuelve la respuesta ya leída."""

    if isinstance(command, PostCommand):
        body = build_json_body(command.pairs)
        logger.debug("POST %s with %d field(s)", command.url, len(body))
        response = await client.post(command.url, json=body)
    else:
        logger.debug("GET %s", command.url)
        response = await client.get(command.url)

    logger.debug("Received %s %s from %s", response.status_code, response.reason_phrase, command.url)
    return to_response_view(response)
