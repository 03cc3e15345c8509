# -*- coding: utf-8 -*-
"""
encuestas/shared/config/settings_prod.py

Overrides para entorno de PRODUCCIÓN.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    python_env: Literal["development", "test", "production"] = "production"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    db_sslmode: Literal["disable", "prefer", "require"] = "require"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=None,  # en producción solo variables de entorno
        extra="ignore",
    )


__all__ = ["ProdSettings"]

# Fin del archivo encuestas/shared/config/settings_prod.py
