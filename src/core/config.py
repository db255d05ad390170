"""Configuración del Core.

Por qué aquí:
- Centraliza los valores por defecto (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores HTTP lean las cabeceras fijas de forma consistente.

Sin fichero `.env`: httpeek no persiste nada entre invocaciones. Las
variables `HTTPEEK_*` son solo overrides opcionales.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPEEK_",
        extra="ignore",
        case_sensitive=False,
    )

    user_agent: str = Field(
        default=f"httpeek/{__version__}",
        min_length=1,
        description="User-Agent enviado en todas las peticiones.",
    )
    marker_header: str = Field(
        default="X-Powered-By",
        min_length=1,
        description="Nombre de la cabecera marcador enviada en todas las peticiones.",
    )
    marker_value: str = Field(
        default="Python",
        min_length=1,
        description="Valor de la cabecera marcador.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentación al re-formatear cuerpos JSON.",
    )

    def default_headers(self) -> dict[str, str]:
        return {
            self.marker_header: self.marker_value,
            "User-Agent": self.user_agent,
        }
