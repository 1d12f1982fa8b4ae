"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el adaptador HTTP lea base URL/timeouts de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "es-aliases"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "es-aliases"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "es-aliases"
    return Path.home() / ".config" / "es-aliases"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ES_ALIASES_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:9200",
        min_length=8,
        description="URL base del cluster (sin la ruta `/_aliases`).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="es-aliases/0.1",
        min_length=1,
        description="User-Agent enviado al cluster.",
    )

    username: str | None = Field(
        default=None,
        description="Usuario para basic auth (opcional).",
    )
    password: str | None = Field(
        default=None,
        description="Password para basic auth (opcional).",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verificar certificados TLS del cluster.",
    )
