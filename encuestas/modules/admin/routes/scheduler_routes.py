# -*- coding: utf-8 -*-
"""
encuestas/modules/admin/routes/scheduler_routes.py

Endpoints operativos para monitoreo del scheduler.

Proporciona información sobre:
- Jobs registrados y próximas ejecuciones (timers de activación y la
  verificación periódica)
- Estado individual de jobs
- Ejecución manual de un job

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from datetime import datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

from apscheduler.jobstores.base import JobLookupError
from fastapi import APIRouter, Depends, HTTPException

from encuestas.modules.activations.routes.deps import get_scheduler_service as _app_scheduler


@runtime_checkable
class SchedulerServiceProtocol(Protocol):
    """Protocol para abstracción del scheduler en tests."""

    @property
    def is_running(self) -> bool: ...

    def get_jobs(self) -> list: ...

    def get_job_status(self, job_id: str) -> Optional[dict]: ...

    async def run_job_now(self, job_id: str) -> Any: ...


def get_scheduler_service(
    scheduler=Depends(_app_scheduler),
) -> SchedulerServiceProtocol:
    """Dependency inyectable para obtener el scheduler."""
    return scheduler


router = APIRouter(
    prefix="/admin/scheduler",
    tags=["admin-scheduler"],
)


# ==================== JOBS ENDPOINTS ====================

@router.get("/jobs")
async def list_scheduled_jobs(
    scheduler: SchedulerServiceProtocol = Depends(get_scheduler_service)
):
    """
    Lista todos los jobs programados.

    Returns:
        Dict con estado del scheduler y lista de jobs:
        - is_running: Bool indicando si el scheduler está activo
        - jobs: Lista de jobs con información de cada uno

    Response Example:
        {
          "is_running": true,
          "jobs": [
            {
              "id": "activation_reconcile_hourly",
              "name": "activation_reconcile_hourly",
              "next_run": "2026-10-19T15:00:00+00:00",
              "trigger": "interval[1:00:00]"
            },
            {
              "id": "deactivate-42",
              "name": "deactivate-42",
              "next_run": "2026-11-15T20:00:00+00:00",
              "trigger": "date[2026-11-15 20:00:00 UTC]"
            }
          ]
        }
    """
    return {
        "is_running": scheduler.is_running,
        "jobs": scheduler.get_jobs()
    }


@router.get("/jobs/{job_id}")
async def get_job_status(
    job_id: str,
    scheduler: SchedulerServiceProtocol = Depends(get_scheduler_service)
):
    """
    Obtiene información detallada de un job específico.

    Raises:
        HTTPException 404: Si el job no existe
    """
    status = scheduler.get_job_status(job_id)

    if not status:
        raise HTTPException(
            status_code=404,
            detail=f"Job '{job_id}' no encontrado"
        )

    return status


@router.post("/jobs/{job_id}/run-now")
async def run_job_now(
    job_id: str,
    scheduler: SchedulerServiceProtocol = Depends(get_scheduler_service)
):
    """
    Ejecuta un job manualmente de inmediato, sin alterar su programación.

    Raises:
        HTTPException 404: Si el job no existe
        HTTPException 500: Si el job lanza una excepción
    """
    try:
        result = await scheduler.run_job_now(job_id)
    except JobLookupError:
        raise HTTPException(
            status_code=404,
            detail=f"Job '{job_id}' no encontrado"
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Error ejecutando job '{job_id}': {str(e)}"
        )

    return {
        "message": f"Job '{job_id}' ejecutado manualmente",
        "job_id": job_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "result": result
    }


@router.get("/health")
async def scheduler_health(
    scheduler: SchedulerServiceProtocol = Depends(get_scheduler_service)
):
    """
    Verifica el estado de salud del scheduler.

    Returns:
        Dict con estado de salud:
        - status: healthy | degraded | unhealthy
        - is_running: Si el scheduler está activo
        - jobs_count: Número de jobs registrados
        - warnings: Lista de advertencias si existen
    """
    jobs = scheduler.get_jobs()

    warnings = []
    status = "healthy"

    if len(jobs) == 0:
        status = "degraded"
        warnings.append("No hay jobs registrados")

    for job in jobs:
        if job["next_run"] is None:
            warnings.append(f"Job '{job['id']}' sin próxima ejecución programada")
            status = "degraded"

    # Prevalece sobre degraded
    if not scheduler.is_running:
        status = "unhealthy"
        warnings.append("Scheduler no está activo")

    return {
        "status": status,
        "is_running": scheduler.is_running,
        "jobs_count": len(jobs),
        "warnings": warnings
    }


# Fin del archivo encuestas/modules/admin/routes/scheduler_routes.py
