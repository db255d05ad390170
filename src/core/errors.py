"""Excepciones del proyecto.

Los adaptadores dejan pasar los errores de `httpx` tal cual; solo la CLI
los convierte en mensajes y códigos de salida.
"""

from __future__ import annotations


class HttpeekError(Exception):
    """Base de todos los errores propios de httpeek."""


class InvalidArgumentError(HttpeekError, ValueError):
    """Argumento de línea de comandos mal formado (URL o `key=value`)."""

    def __init__(self, message: str, *, value: str) -> None:
        super().__init__(message)
        self.value = value


class ResponseFormatError(HttpeekError):
    """El cuerpo declarado como JSON no se pudo decodificar."""
