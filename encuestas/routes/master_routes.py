# -*- coding: utf-8 -*-
"""
encuestas/routes/master_routes.py

Router maestro bajo /api:
  - /api/encuestas-activacion/...  programaciones de activación
  - /api/admin/scheduler/...       monitoreo del scheduler

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from encuestas.modules.activations.routes import router as activations_router
from encuestas.modules.admin.routes import scheduler_router

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")

_loaded: list[str] = []


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.info(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


_include(api, activations_router, "activations")
_include(api, scheduler_router, "admin_scheduler")


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["api", "loaded_routers"]

# Fin del archivo encuestas/routes/master_routes.py
