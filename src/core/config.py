"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los valores literales de cada petición viven como defaults: se pueden
  sobreescribir por env var sin tocar el código del runner.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_HOST_RE = re.compile(r"[A-Za-z0-9.\-:]+")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "readclub-runner"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "readclub-runner"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "readclub-runner"
    return Path.home() / ".config" / "readclub-runner"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/runner/doctor.
    """

    model_config = SettingsConfigDict(
        env_prefix="READCLUB_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:4000",
        min_length=8,
        description="Base URL de la API Reading Community.",
    )
    display_delay_seconds: float = Field(
        default=4.0,
        ge=0,
        description="Espera fija entre el settle de la petición y la escritura en pantalla.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="readclub-runner/0.1",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    # Payloads literales (los mismos que usaba la página de pruebas).
    register_username: str = Field(default="abner", min_length=1)
    register_email: str = Field(default="abner@example.com", min_length=1)
    register_password: str = Field(default="password", min_length=1)
    activation_token: str = Field(default="HLFGJCTPATRSW6MSGYSE4DEFPQ", min_length=1)
    reset_email: str = Field(default="abner@example.com", min_length=1)
    reset_token: str = Field(default="6O6LWJKLEKFHMDHGCMQTE62CUY", min_length=1)
    new_password: str = Field(default="PASSWORD_CAPS", min_length=1)

    @field_validator("api_base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        # Debe ser una URL http(s) absoluta con host y puerto válidos.
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid api_base_url: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("api_base_url must be an absolute http(s) URL")
        if not _HOST_RE.fullmatch(url.host):
            raise ValueError(f"invalid api_base_url host: {url.host!r}")
        if url.port is not None and not 0 < url.port <= 65535:
            raise ValueError(f"invalid api_base_url port: {url.port}")
        return value
