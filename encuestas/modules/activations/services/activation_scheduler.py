# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/services/activation_scheduler.py

Mantiene el `estado` de cada encuesta sincronizado con sus programaciones
de activación activas.

Dos mecanismos:
1. Timers de frontera por programación (`activate-{id}` / `deactivate-{id}`)
   registrados en el SchedulerService inyectado.
2. Verificación completa (`reconcile`) que corrige cualquier desviación:
   timers perdidos por reinicio, cancelados, o ediciones manuales en BD.

Reglas:
- La ventana es semiabierta [fecha_inicio, fecha_fin), en timers y en la
  verificación.
- Una encuesta está Activa si AL MENOS una programación activa cubre el
  instante actual. Desactivar (por timer o de forma inmediata) se omite
  cuando otra programación de la misma encuesta sigue vigente.
- Errores al disparar un timer se registran y no se reintentan; la
  siguiente verificación los corrige.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from encuestas.modules.activations.models import SurveyActivation
from encuestas.modules.activations.repositories import ActivationRepository
from encuestas.modules.surveys.enums import SurveyState
from encuestas.modules.surveys.repositories import SurveyRepository
from encuestas.shared.scheduler import SchedulerService
from encuestas.shared.utils.datetime_utils import as_utc, utcnow

logger = logging.getLogger(__name__)

ACTIVATE_PREFIX = "activate"
DEACTIVATE_PREFIX = "deactivate"


def activate_job_id(record_id: int) -> str:
    return f"{ACTIVATE_PREFIX}-{record_id}"


def deactivate_job_id(record_id: int) -> str:
    return f"{DEACTIVATE_PREFIX}-{record_id}"


def window_covers(record: SurveyActivation, instant: datetime) -> bool:
    """True si `instant` está dentro de [fecha_inicio, fecha_fin)."""
    return as_utc(record.fecha_inicio) <= instant < as_utc(record.fecha_fin)


class ActivationScheduler:
    """
    Programador de activaciones de encuestas.

    Args:
        scheduler: Registro de timers (instancia propiedad de la aplicación)
        session_factory: Fábrica de AsyncSession para timers y verificación
        clock: Reloj inyectable; debe devolver datetimes aware
    """

    def __init__(
        self,
        scheduler: SchedulerService,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.scheduler = scheduler
        self.session_factory = session_factory
        self._clock = clock
        self._activations = ActivationRepository()
        self._surveys = SurveyRepository()

    def now(self) -> datetime:
        return as_utc(self._clock())

    # ------------------------------------------------------------------
    # Timers por programación
    # ------------------------------------------------------------------

    async def schedule_for_record(
        self,
        record: SurveyActivation,
        db: Optional[AsyncSession] = None,
    ) -> None:
        """
        Registra los timers de frontera de la programación o aplica el
        estado de inmediato si la frontera ya pasó.

        Las dos fronteras se evalúan por separado: una ventana en curso
        produce una activación inmediata más un timer de desactivación.

        Si se pasa `db`, los cambios inmediatos se hacen con flush sobre esa
        sesión y el commit queda a cargo del llamador. Sin `db` se abre una
        sesión propia y se confirma. Los errores de escritura se propagan.
        """
        if not record.activo:
            logger.debug("[activation_scheduler] programación %s inactiva, se ignora", record.id)
            return

        now = self.now()
        inicio = as_utc(record.fecha_inicio)
        fin = as_utc(record.fecha_fin)
        delay_start = (inicio - now).total_seconds()
        delay_end = (fin - now).total_seconds()

        if delay_start > 0:
            self.scheduler.add_date_job(
                self.fire,
                job_id=activate_job_id(record.id),
                run_date=inicio,
                record_id=record.id,
                survey_id=record.encuesta_id,
                target_state=SurveyState.ACTIVA,
            )
        elif delay_end > 0:
            await self._apply_now(record, SurveyState.ACTIVA, db, now)

        if delay_end > 0:
            self.scheduler.add_date_job(
                self.fire,
                job_id=deactivate_job_id(record.id),
                run_date=fin,
                record_id=record.id,
                survey_id=record.encuesta_id,
                target_state=SurveyState.INACTIVA,
            )
        else:
            await self._apply_now(record, SurveyState.INACTIVA, db, now)

        logger.info(
            "[activation_scheduler] programación %s (encuesta %s) programada: "
            "delay_start=%.0fs delay_end=%.0fs",
            record.id,
            record.encuesta_id,
            delay_start,
            delay_end,
        )

    def cancel_for_record(self, record_id: int) -> List[str]:
        """
        Cancela ambos timers de la programación. Que no existan no es error.

        Returns:
            Claves efectivamente eliminadas
        """
        removed = []
        for job_id in (activate_job_id(record_id), deactivate_job_id(record_id)):
            if self.scheduler.remove_job(job_id):
                removed.append(job_id)
        if removed:
            logger.info("[activation_scheduler] timers cancelados: %s", ", ".join(removed))
        return removed

    async def reload_all_on_startup(self) -> Dict[str, int]:
        """
        Reprograma todas las programaciones activas. Se invoca una vez al
        arrancar; es lo único que recupera los timers tras un reinicio.

        Un fallo en una programación se registra y no impide cargar el resto:
        cada cambio de estado inmediato usa su propia sesión y transacción.
        """
        loaded = 0
        failed = 0
        async with self.session_factory() as session:
            records = await self._activations.list_active(session)

        for record in records:
            try:
                await self.schedule_for_record(record)
                loaded += 1
            except Exception:
                failed += 1
                logger.error(
                    "[activation_scheduler] no se pudo programar %s al arrancar",
                    record.id,
                    exc_info=True,
                )

        logger.info(
            "[activation_scheduler] recarga inicial: %d programaciones, %d con error",
            loaded,
            failed,
        )
        return {"records": loaded, "failed": failed}

    # ------------------------------------------------------------------
    # Disparo de timers
    # ------------------------------------------------------------------

    async def fire(
        self,
        record_id: int,
        survey_id: int,
        target_state: str,
    ) -> Optional[SurveyState]:
        """
        Callback de los timers. Abre su propia sesión.

        Returns:
            El estado escrito, o None si se omitió o falló.
        """
        target = SurveyState(target_state)
        try:
            async with self.session_factory() as session:
                if target is SurveyState.INACTIVA and await self._covered_by_other(
                    session, survey_id, record_id, self.now()
                ):
                    logger.info(
                        "[activation_scheduler] desactivación de encuesta %s omitida: "
                        "otra programación sigue vigente",
                        survey_id,
                    )
                    return None

                survey = await self._surveys.set_state(session, survey_id, target)
                if survey is None:
                    logger.warning(
                        "[activation_scheduler] encuesta %s no existe (programación %s)",
                        survey_id,
                        record_id,
                    )
                    return None
                await session.commit()

            logger.info(
                "[activation_scheduler] encuesta %s → %s (programación %s)",
                survey_id,
                target.value,
                record_id,
            )
            return target
        except Exception:
            logger.error(
                "[activation_scheduler] fallo al aplicar %s a encuesta %s (programación %s)",
                target.value,
                survey_id,
                record_id,
                exc_info=True,
            )
            return None

    # ------------------------------------------------------------------
    # Verificación periódica
    # ------------------------------------------------------------------

    async def reconcile(self) -> dict:
        """
        Reevalúa todas las programaciones activas contra la hora actual y
        corrige el estado de las encuestas que no coinciden. Idempotente.
        """
        started = time.perf_counter()
        now = self.now()
        activated: List[int] = []
        deactivated: List[int] = []

        async with self.session_factory() as session:
            records = await self._activations.list_active(session, with_survey=True)

            desired: Dict[int, bool] = {}
            surveys = {}
            for record in records:
                covers = window_covers(record, now)
                desired[record.encuesta_id] = desired.get(record.encuesta_id, False) or covers
                surveys[record.encuesta_id] = record.encuesta

            for survey_id, should_be_active in desired.items():
                survey = surveys[survey_id]
                if survey is None:
                    continue
                target = SurveyState.ACTIVA if should_be_active else SurveyState.INACTIVA
                if survey.estado != target:
                    survey.estado = target
                    (activated if should_be_active else deactivated).append(survey_id)

            if activated or deactivated:
                await session.commit()

        summary = {
            "records_evaluated": len(records),
            "surveys_evaluated": len(desired),
            "activated": len(activated),
            "deactivated": len(deactivated),
            "timestamp": now,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        }
        if activated or deactivated:
            logger.info(
                "[activation_scheduler] verificación: activadas=%s desactivadas=%s",
                activated,
                deactivated,
            )
        else:
            logger.debug("[activation_scheduler] verificación sin cambios")
        return summary

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    async def _covered_by_other(
        self,
        session: AsyncSession,
        survey_id: int,
        record_id: int,
        instant: datetime,
    ) -> bool:
        others = await self._activations.list_active_for_survey_excluding(
            session, survey_id, exclude_id=record_id
        )
        return any(window_covers(other, instant) for other in others)

    async def _apply_now(
        self,
        record: SurveyActivation,
        target: SurveyState,
        db: Optional[AsyncSession],
        now: datetime,
    ) -> None:
        if db is not None:
            await self._write_state(db, record, target, now)
            return
        async with self.session_factory() as session:
            await self._write_state(session, record, target, now)
            await session.commit()

    async def _write_state(
        self,
        session: AsyncSession,
        record: SurveyActivation,
        target: SurveyState,
        now: datetime,
    ) -> None:
        if target is SurveyState.INACTIVA and await self._covered_by_other(
            session, record.encuesta_id, record.id, now
        ):
            logger.debug(
                "[activation_scheduler] encuesta %s se mantiene Activa por otra programación",
                record.encuesta_id,
            )
            return
        await self._surveys.set_state(session, record.encuesta_id, target)


__all__ = [
    "ActivationScheduler",
    "activate_job_id",
    "deactivate_job_id",
    "window_covers",
]

# Fin del archivo encuestas/modules/activations/services/activation_scheduler.py
