"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza las cabeceras fijas (marcador + User-Agent) de cada petición.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con las cabeceras por defecto.

    No se fija timeout, proxy ni TLS: se usan los defaults de httpx.
    """

    settings = settings or AppSettings()
    headers = settings.default_headers()
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(headers=headers, transport=transport)
