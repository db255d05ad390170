"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los comandos y la vista de respuesta viven solo durante una invocación.

Nota:
- Estos modelos describen *qué* se pide y *qué* se recibe, no *cómo*.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Pair(BaseModel):
    """Par clave/valor extraído de un token `key=value` de la CLI."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        description="Texto antes del primer '='.",
    )
    value: str = Field(
        ...,
        description="Texto tras el primer '=' (puede contener más '=').",
    )


class GetCommand(BaseModel):
    """Petición GET sin cuerpo."""

    url: str = Field(
        ...,
        min_length=1,
        description="URL absoluta ya validada.",
    )


class PostCommand(BaseModel):
    """Petición POST con cuerpo JSON construido a partir de pares."""

    url: str = Field(
        ...,
        min_length=1,
        description="URL absoluta ya validada.",
    )
    pairs: list[Pair] = Field(
        default_factory=list,
        description="Pares en el orden en que llegaron por la CLI.",
    )


Command = Union[GetCommand, PostCommand]


class ResponseView(BaseModel):
    """Vista transitoria de la única respuesta recibida.

    Por qué una vista y no `httpx.Response`:
    - El renderer no depende de httpx y se puede probar con datos fijos.
    """

    http_version: str = Field(
        default="HTTP/1.1",
        description="Versión de protocolo tal como la reporta el cliente.",
    )
    status_code: int = Field(
        ...,
        ge=100,
        le=999,
        description="Código de estado numérico.",
    )
    reason_phrase: str = Field(
        default="",
        description="Frase de estado (p.ej. 'OK').",
    )
    headers: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Cabeceras en el orden recibido, duplicados incluidos.",
    )
    content_type: str | None = Field(
        default=None,
        description="Valor crudo de Content-Type, si vino.",
    )
    body: str = Field(
        default="",
        description="Cuerpo decodificado como texto.",
    )

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()
