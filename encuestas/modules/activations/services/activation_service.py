# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/services/activation_service.py

Capa de aplicación de programaciones de activación.

Orquesta repositorio + ActivationScheduler:
- create: valida ventana y encuesta, persiste, programa timers
- update: valida la ventana resultante, cancela timers, guarda, reprograma
- delete: borrado lógico, cancela timers
- verify_now: verificación completa de estados bajo demanda

La validación ocurre antes de cualquier escritura o timer: una operación
rechazada no deja efectos parciales.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from encuestas.modules.activations.errors import (
    ActivationNotFound,
    InvalidActivationWindow,
    SurveyNotFound,
)
from encuestas.modules.activations.models import SurveyActivation
from encuestas.modules.activations.repositories import ActivationRepository
from encuestas.modules.activations.services.activation_scheduler import ActivationScheduler
from encuestas.modules.surveys.repositories import SurveyRepository
from encuestas.shared.utils.datetime_utils import as_utc

logger = logging.getLogger(__name__)

VERIFY_MESSAGE = "Verificación de estados completada"


def validate_window(fecha_inicio: datetime, fecha_fin: datetime) -> None:
    """Lanza InvalidActivationWindow si fecha_fin <= fecha_inicio."""
    if as_utc(fecha_fin) <= as_utc(fecha_inicio):
        raise InvalidActivationWindow(fecha_inicio, fecha_fin)


class ActivationService:
    """Comandos y consultas de programaciones de activación."""

    def __init__(self, db: AsyncSession, scheduler: ActivationScheduler):
        self.db = db
        self.scheduler = scheduler
        self.activations = ActivationRepository()
        self.surveys = SurveyRepository()

    # ---- Consultas ----
    async def list_by_survey(self, encuesta_id: int) -> Sequence[SurveyActivation]:
        return await self.activations.list_by_survey(self.db, encuesta_id)

    async def get_by_id(self, activation_id: int) -> SurveyActivation:
        record = await self.activations.get_by_id(self.db, activation_id)
        if record is None:
            raise ActivationNotFound(activation_id)
        return record

    # ---- Comandos ----
    async def create(
        self,
        *,
        encuesta_id: int,
        fecha_inicio: datetime,
        fecha_fin: datetime,
        creator_user_id: Optional[int] = None,
    ) -> SurveyActivation:
        validate_window(fecha_inicio, fecha_fin)
        if not await self.surveys.exists(self.db, encuesta_id):
            raise SurveyNotFound(encuesta_id)

        record = await self.activations.create(
            self.db,
            encuesta_id=encuesta_id,
            fecha_inicio=as_utc(fecha_inicio),
            fecha_fin=as_utc(fecha_fin),
            creator_user_id=creator_user_id,
        )
        await self.db.commit()

        await self.scheduler.schedule_for_record(record, db=self.db)
        await self.db.commit()

        logger.info(
            "Programación %s creada para encuesta %s [%s, %s)",
            record.id,
            encuesta_id,
            record.fecha_inicio,
            record.fecha_fin,
        )
        return record

    async def update(self, activation_id: int, fields: Dict[str, Any]) -> SurveyActivation:
        """
        Actualiza la programación. `fields` solo trae lo que cambia.
        """
        record = await self.get_by_id(activation_id)

        fecha_inicio = fields.get("fecha_inicio", record.fecha_inicio)
        fecha_fin = fields.get("fecha_fin", record.fecha_fin)
        validate_window(fecha_inicio, fecha_fin)

        new_survey = fields.get("encuesta_id")
        if new_survey is not None and new_survey != record.encuesta_id:
            if not await self.surveys.exists(self.db, new_survey):
                raise SurveyNotFound(new_survey)

        changes = dict(fields)
        for key in ("fecha_inicio", "fecha_fin"):
            if key in changes:
                changes[key] = as_utc(changes[key])

        self.scheduler.cancel_for_record(record.id)
        record = await self.activations.update(self.db, record, changes)
        await self.db.commit()

        if record.activo:
            await self.scheduler.schedule_for_record(record, db=self.db)
            await self.db.commit()

        logger.info("Programación %s actualizada: %s", record.id, sorted(changes))
        return record

    async def delete(self, activation_id: int) -> SurveyActivation:
        """Borrado lógico: cancela timers y marca `activo = False`."""
        record = await self.get_by_id(activation_id)
        self.scheduler.cancel_for_record(record.id)
        record = await self.activations.soft_delete(self.db, record)
        await self.db.commit()
        logger.info("Programación %s eliminada (borrado lógico)", record.id)
        return record

    async def verify_now(self) -> Dict[str, Any]:
        summary = await self.scheduler.reconcile()
        return {"message": VERIFY_MESSAGE, **summary}


__all__ = ["ActivationService", "validate_window", "VERIFY_MESSAGE"]

# Fin del archivo encuestas/modules/activations/services/activation_service.py
