# -*- coding: utf-8 -*-
"""
encuestas/routes/health_routes.py

Endpoint básico de health check del backend de Encuestas.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from encuestas import __version__
from encuestas.core.settings import get_settings
from encuestas.core.db import check_database_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del backend, incluyendo conectividad a "
        "la base de datos y si el scheduler de activaciones está activo."
    ),
)
async def health_check(request: Request) -> dict:
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)
    scheduler = getattr(request.app.state, "scheduler", None)
    scheduler_ok = bool(scheduler and scheduler.is_running)

    return {
        "status": "ok" if db_ok and scheduler_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "scheduler": {
            "running": scheduler_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": __version__,
        },
    }

# Fin del archivo encuestas/routes/health_routes.py
