"""Modelos y entidades del dominio.

- Aquí viven las estructuras de datos puras (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo comandos y respuestas.
"""

from core.domain.models import Command, GetCommand, Pair, PostCommand, ResponseView

__all__ = ["Command", "GetCommand", "Pair", "PostCommand", "ResponseView"]
