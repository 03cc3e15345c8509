# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/routes/deps.py

Dependencias inyectables del módulo de activaciones.

El SchedulerService y el ActivationScheduler los crea el lifespan de la
aplicación y viven en `app.state`; aquí solo se leen. Los tests pueden
overridear cualquiera de estas dependencias.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from encuestas.shared.database.database import get_db
from encuestas.shared.scheduler import SchedulerService
from encuestas.shared.utils.http_exceptions import InternalServerException
from encuestas.modules.activations.services import ActivationScheduler, ActivationService


def get_scheduler_service(request: Request) -> SchedulerService:
    scheduler = getattr(request.app.state, "scheduler", None)
    if scheduler is None:
        raise InternalServerException("Scheduler no inicializado")
    return scheduler


def get_activation_scheduler(request: Request) -> ActivationScheduler:
    activation_scheduler = getattr(request.app.state, "activation_scheduler", None)
    if activation_scheduler is None:
        raise InternalServerException("Scheduler de activaciones no inicializado")
    return activation_scheduler


async def get_activation_service(
    db: AsyncSession = Depends(get_db),
    scheduler: ActivationScheduler = Depends(get_activation_scheduler),
) -> ActivationService:
    """
    Devuelve el servicio real de programaciones para la petición en curso.
    """
    return ActivationService(db, scheduler)


__all__ = [
    "get_db",
    "get_scheduler_service",
    "get_activation_scheduler",
    "get_activation_service",
]
# Fin del archivo encuestas/modules/activations/routes/deps.py
