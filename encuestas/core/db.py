# -*- coding: utf-8 -*-
"""
encuestas/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Envuelve `encuestas.shared.database.database`.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from encuestas.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_async_session,
    get_db,
    check_database_health,
    init_models,
)


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_async_session",
    "get_db",
    "check_database_health",
    "init_models",
]

# Fin del archivo encuestas/core/db.py
