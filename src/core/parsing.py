"""Parsing de argumentos de la CLI.

Todo lo que se valida aquí ocurre antes de cualquier I/O de red: una URL
mal formada o un token sin '=' detienen el programa sin tocar la red.
"""

from __future__ import annotations

from typing import Iterable

import httpx

from core.domain.models import Pair
from core.errors import InvalidArgumentError


def parse_url(value: str) -> str:
    """Valida que `value` sea una URL absoluta (scheme + host) y la devuelve intacta."""

    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidArgumentError(f"Invalid URL {value!r}: {exc}", value=value) from exc

    if not url.scheme or not url.host:
        raise InvalidArgumentError(
            f"Invalid URL {value!r}: expected an absolute URL with scheme and host",
            value=value,
        )
    return value


def parse_pair(token: str) -> Pair:
    """Divide `token` por el primer '='.

    El resto del texto se conserva literal en el valor: `k=a=b` -> ("k", "a=b").
    """

    key, sep, value = token.partition("=")
    if not sep:
        raise InvalidArgumentError(f"Failed to parse {token!r}: expected key=value", value=token)
    return Pair(key=key, value=value)


def parse_pairs(tokens: Iterable[str]) -> list[Pair]:
    return [parse_pair(token) for token in tokens]
