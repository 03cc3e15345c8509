# -*- coding: utf-8 -*-
"""
encuestas/shared/config/settings_dev.py

Overrides para entorno de DESARROLLO usando Pydantic v2.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class DevSettings(BaseAppSettings):
    """Configuración para entorno de desarrollo."""

    python_env: str = "development"

    # Logging legible en consola
    log_level: str = "DEBUG"
    log_format: str = "plain"

    # En desarrollo no se requiere SSL
    db_sslmode: str = "disable"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["DevSettings"]

# Fin del archivo encuestas/shared/config/settings_dev.py
