# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/repositories/survey_repository.py

Repositorio async de encuestas.

Responsabilidades:
- Lectura de la encuesta y de su estado
- Escritura del campo `estado` (única mutación que hace el scheduler)

Las escrituras hacen flush; el commit lo decide el llamador.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from encuestas.modules.surveys.enums import SurveyState
from encuestas.modules.surveys.models import Survey


class SurveyRepository:
    """Acceso a la tabla `encuestas`."""

    async def get_by_id(
        self,
        session: AsyncSession,
        encuesta_id: int,
    ) -> Optional[Survey]:
        stmt = select(Survey).where(Survey.id == encuesta_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, encuesta_id: int) -> bool:
        stmt = select(Survey.id).where(Survey.id == encuesta_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_state(
        self,
        session: AsyncSession,
        encuesta_id: int,
    ) -> Optional[SurveyState]:
        """
        Estado actual de la encuesta, o None si no existe.
        """
        stmt = select(Survey.estado).where(Survey.id == encuesta_id)
        result = await session.execute(stmt)
        value = result.scalar_one_or_none()
        return SurveyState(value) if value is not None else None

    async def set_state(
        self,
        session: AsyncSession,
        encuesta_id: int,
        estado: SurveyState,
    ) -> Optional[Survey]:
        """
        Asigna `estado` a la encuesta.

        Returns:
            La encuesta actualizada, o None si no existe.
        """
        survey = await self.get_by_id(session, encuesta_id)
        if survey is None:
            return None
        survey.estado = estado
        await session.flush()
        return survey


__all__ = ["SurveyRepository"]
# Fin del archivo encuestas/modules/surveys/repositories/survey_repository.py
