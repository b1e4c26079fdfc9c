"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/prober) lean config de forma consistente.

El Core funciona sin ninguna variable definida: todos los campos tienen defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# LinkedIn responde 999 cuando detecta tráfico automatizado.
BOT_DEFENSE_STATUS = 999

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "credify"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "credify"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "credify"
    return Path.home() / ".config" / "credify"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración de la validación (prefijo `CREDIFY_`).

    Por qué pydantic-settings:
    - Los límites (timeout acotado, delay no negativo) se validan al leer el env.
    - CLI, sonda y fachada leen el mismo objeto; ningún adaptador lee variables de entorno por su cuenta.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDIFY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout por request (segundos). Nunca se permite una espera ilimitada.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent realista para las sondas contra LinkedIn.",
    )
    bypass_cookie: str = Field(
        default="sl=v=1&1",
        min_length=1,
        description="Cookie enviada en el único reintento tras un status 999.",
    )
    proxy: str | None = Field(
        default=None,
        description="Proxy HTTP(S) opcional para el cliente httpx.",
    )
    fingerprints_path: Path | None = Field(
        default=None,
        description="Ruta local a un JSON que reemplaza la tabla de huellas por defecto.",
    )
    batch_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Pausa entre URLs en la CLI (LinkedIn limita agresivamente).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging raíz (DEBUG, INFO, WARNING, ERROR).",
    )

    def effective_timeout(self, override: float | None = None) -> float:
        """Timeout a usar en una llamada: el override si es válido, si no el configurado."""

        if override is not None and override > 0:
            return float(override)
        return self.http_timeout_seconds
