# -*- coding: utf-8 -*-
"""
encuestas/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION, as_db_enum
from .database import (
    engine,
    SessionLocal,
    get_async_session,
    get_db,
    check_database_health,
    init_models,
)

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "as_db_enum",
    "get_async_session",
    "get_db",
    "check_database_health",
    "init_models",
]

# Fin del archivo encuestas/shared/database/__init__.py
