# -*- coding: utf-8 -*-
"""
encuestas/core/__init__.py

Fachada unificada para componentes centrales del backend:
- Configuración (settings)
- Logging
- Motor de base de datos y sesiones

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from .settings import get_settings
from .logging import setup_logging
from .db import (
    engine,
    SessionLocal,
    Base,
    get_async_session,
    get_db,
    check_database_health,
    init_models,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "engine",
    "SessionLocal",
    "Base",
    "get_async_session",
    "get_db",
    "check_database_health",
    "init_models",
]

# Fin del archivo encuestas/core/__init__.py
