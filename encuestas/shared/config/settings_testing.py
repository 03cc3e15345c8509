# -*- coding: utf-8 -*-
"""
encuestas/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS: logging moderado, SQLite local y
creación de tablas al arrancar.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    python_env: str = "test"

    log_level: str = "WARNING"
    log_format: str = "pretty"

    db_url: Optional[str] = Field(
        default="sqlite+aiosqlite:///./encuestas_test.db",
        validation_alias="DB_URL",
    )
    db_sslmode: str = "disable"
    db_create_all: bool = Field(default=True, validation_alias="DB_CREATE_ALL")

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]

# Fin del archivo encuestas/shared/config/settings_testing.py
