# -*- coding: utf-8 -*-
"""
encuestas/shared/scheduler/scheduler_service.py

Registro de tareas programadas sobre APScheduler.

Cubre dos usos:
- Jobs periódicos por intervalo, p.ej. la verificación de respaldo.
- Timers de un solo disparo identificados por clave (DateTrigger), p.ej.
  `activate-{id}` / `deactivate-{id}` de las programaciones de encuestas.

No es un singleton de módulo: la aplicación crea una instancia en el
arranque (lifespan), la guarda en `app.state.scheduler` y la detiene en
el shutdown. Los jobs viven solo en memoria (MemoryJobStore).

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.base import JobLookupError
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Servicio de programación de tareas.

    Funcionalidades:
    - Jobs a intervalos regulares
    - Timers de un solo disparo registrados por clave
    - Cancelación idempotente por clave
    - Consulta de jobs para monitoreo
    """

    def __init__(self, timezone: str = "UTC", misfire_grace_time: int = 30):
        jobstores = {
            'default': MemoryJobStore()
        }
        executors = {
            'default': AsyncIOExecutor()
        }
        job_defaults = {
            'coalesce': True,  # Combinar ejecuciones perdidas
            'max_instances': 1,  # Una instancia por job
            'misfire_grace_time': misfire_grace_time
        }

        self._scheduler = AsyncIOScheduler(
            jobstores=jobstores,
            executors=executors,
            job_defaults=job_defaults,
            timezone=timezone
        )
        self._started = False
        logger.info("SchedulerService inicializado (tz=%s)", timezone)

    def start(self):
        """Inicia el scheduler. Requiere un event loop en ejecución."""
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("SchedulerService iniciado")

    def shutdown(self, wait: bool = True):
        """
        Detiene el scheduler y descarta los timers pendientes.

        Args:
            wait: Si True, espera a que terminen los jobs en ejecución
        """
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("SchedulerService detenido")

    def _add_job(self, func: Callable, trigger, job_id: str, kwargs: dict) -> None:
        # Con el scheduler detenido APScheduler encola sin reemplazar por id
        if not self._scheduler.running:
            self.remove_job(job_id)
        self._scheduler.add_job(
            func=func,
            trigger=trigger,
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs
        )

    def add_interval_job(
        self,
        func: Callable,
        job_id: str,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs
    ) -> str:
        """
        Agrega un job que se ejecuta a intervalos regulares.

        Args:
            func: Función a ejecutar
            job_id: ID único del job
            hours: Intervalo en horas
            minutes: Intervalo en minutos
            seconds: Intervalo en segundos
            **kwargs: Argumentos adicionales para func

        Returns:
            ID del job agregado
        """
        trigger = IntervalTrigger(
            hours=hours,
            minutes=minutes,
            seconds=seconds
        )

        self._add_job(func, trigger, job_id, kwargs)

        logger.info(f"Job '{job_id}' agregado: cada {hours}h {minutes}m {seconds}s")
        return job_id

    def add_date_job(
        self,
        func: Callable,
        job_id: str,
        run_date: datetime,
        **kwargs
    ) -> str:
        """
        Registra un timer de un solo disparo bajo la clave `job_id`.

        Si ya existía un job con la misma clave, se reemplaza. Al dispararse,
        APScheduler lo elimina del registro.

        Args:
            func: Callable (sync o async) a ejecutar
            job_id: Clave del timer
            run_date: Instante de disparo (datetime aware)
            **kwargs: Argumentos para func

        Returns:
            ID del job agregado
        """
        self._add_job(func, DateTrigger(run_date=run_date), job_id, kwargs)

        logger.debug(f"Timer '{job_id}' registrado para {run_date.isoformat()}")
        return job_id

    def remove_job(self, job_id: str) -> bool:
        """
        Elimina un job programado. La ausencia del job no es un error.

        Returns:
            True si se eliminó, False si no existía
        """
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            return False
        logger.debug(f"Job '{job_id}' eliminado")
        return True

    def has_job(self, job_id: str) -> bool:
        return self._scheduler.get_job(job_id) is not None

    def get_job(self, job_id: str):
        """Devuelve el Job de APScheduler o None."""
        return self._scheduler.get_job(job_id)

    @staticmethod
    def _describe(job) -> dict:
        # Los jobs pendientes (scheduler detenido) aún no tienen next_run_time
        return {
            'id': job.id,
            'name': job.name,
            'next_run': getattr(job, 'next_run_time', None),
            'trigger': str(job.trigger),
        }

    def get_jobs(self) -> list:
        """
        Obtiene lista de jobs programados.

        Returns:
            Lista de jobs con información básica
        """
        return [self._describe(job) for job in self._scheduler.get_jobs()]

    def get_job_status(self, job_id: str) -> Optional[dict]:
        """
        Obtiene estado de un job específico.

        Returns:
            Dict con información del job o None si no existe
        """
        job = self._scheduler.get_job(job_id)
        if job:
            status = self._describe(job)
            status['pending'] = job.pending
            return status
        return None

    async def run_job_now(self, job_id: str) -> Any:
        """
        Ejecuta el callable de un job de inmediato, sin alterar su trigger.

        Raises:
            JobLookupError: si el job no existe
        """
        job = self._scheduler.get_job(job_id)
        if job is None:
            raise JobLookupError(job_id)
        result = job.func(*job.args, **job.kwargs)
        if hasattr(result, "__await__"):
            result = await result
        return result

    @property
    def is_running(self) -> bool:
        """Retorna True si el scheduler está activo."""
        return self._started and self._scheduler.running


# Fin del archivo encuestas/shared/scheduler/scheduler_service.py
