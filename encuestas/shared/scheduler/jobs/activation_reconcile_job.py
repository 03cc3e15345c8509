# -*- coding: utf-8 -*-
"""
encuestas/shared/scheduler/jobs/activation_reconcile_job.py

Job periódico de verificación de estados de encuestas.

Respaldo de los timers de activación: corrige encuestas cuyo estado no
coincide con sus programaciones (timers perdidos por reinicio, fallos al
disparar, ediciones manuales en BD). Corre cada hora por defecto
(ACTIVATION_RECONCILE_INTERVAL_MINUTES).

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from encuestas.modules.activations.services import ActivationScheduler
    from encuestas.shared.scheduler import SchedulerService

logger = logging.getLogger(__name__)

JOB_ID = "activation_reconcile_hourly"


async def run_activation_reconcile(
    activation_scheduler: "ActivationScheduler",
) -> Dict[str, Any]:
    """
    Ejecuta una verificación completa.

    Nunca lanza: un error se registra y se devuelve en el resultado para
    no afectar al scheduler ni a los timers.

    Returns:
        Dict con el resumen de la verificación o con `error`
    """
    started = datetime.now(timezone.utc)
    try:
        summary = await activation_scheduler.reconcile()
    except Exception as e:
        logger.error(
            "[activation_reconcile] error: %s",
            str(e),
            exc_info=True,
        )
        return {
            "timestamp": started.isoformat(),
            "error": str(e),
            "activated": 0,
            "deactivated": 0,
        }

    logger.info(
        "[activation_reconcile] records=%d surveys=%d activated=%d "
        "deactivated=%d duration_ms=%.2f",
        summary["records_evaluated"],
        summary["surveys_evaluated"],
        summary["activated"],
        summary["deactivated"],
        summary["duration_ms"],
    )
    return {**summary, "timestamp": summary["timestamp"].isoformat()}


def register_activation_reconcile_job(
    scheduler: "SchedulerService",
    activation_scheduler: "ActivationScheduler",
    interval_minutes: int = 60,
) -> str:
    """
    Registra la verificación periódica en el scheduler.

    El periodo cuenta desde el arranque del proceso, no desde el inicio
    de cada hora.

    Args:
        scheduler: Instancia de SchedulerService
        activation_scheduler: Servicio que ejecuta la verificación
        interval_minutes: Periodo en minutos

    Returns:
        ID del job registrado
    """
    scheduler.add_interval_job(
        func=run_activation_reconcile,
        job_id=JOB_ID,
        minutes=interval_minutes,
        activation_scheduler=activation_scheduler,
    )

    logger.info(
        "[activation_reconcile] Job '%s' registered: every %d min",
        JOB_ID,
        interval_minutes,
    )
    return JOB_ID


__all__ = [
    "JOB_ID",
    "run_activation_reconcile",
    "register_activation_reconcile_job",
]

# Fin del archivo encuestas/shared/scheduler/jobs/activation_reconcile_job.py
