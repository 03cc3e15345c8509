# -*- coding: utf-8 -*-
"""
encuestas/shared/utils/datetime_utils.py

Normalización de fechas a UTC.

SQLite (aiosqlite) devuelve DateTime sin tzinfo aunque la columna sea
`timezone=True`; el resto del sistema trabaja siempre con datetimes
aware en UTC, así que todo valor que cruza la frontera ORM/API pasa
por `as_utc`.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive → se asume UTC; aware → se convierte a UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = ["utcnow", "as_utc"]
