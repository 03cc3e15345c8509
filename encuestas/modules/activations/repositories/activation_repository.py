# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/repositories/activation_repository.py

Repositorio async de programaciones de activación (SurveyActivation).

Responsabilidades:
- CRUD sobre SurveyActivation (borrado lógico)
- Listados de programaciones activas (globales y por encuesta)

Las escrituras hacen flush; el commit lo decide la capa de servicios.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from encuestas.modules.activations.models import SurveyActivation


class ActivationRepository:
    """
    Repositorio de programaciones de activación.
    """

    async def create(
        self,
        session: AsyncSession,
        *,
        encuesta_id: int,
        fecha_inicio: datetime,
        fecha_fin: datetime,
        creator_user_id: Optional[int] = None,
    ) -> SurveyActivation:
        """
        Inserta una programación activa.

        Args:
            session: Sesión async de SQLAlchemy
            encuesta_id: Encuesta a la que aplica la ventana
            fecha_inicio: Inicio de la ventana (UTC)
            fecha_fin: Fin de la ventana (UTC)
            creator_user_id: Usuario que la crea (opcional)

        Returns:
            Instancia persistida (con id)
        """
        record = SurveyActivation(
            encuesta_id=encuesta_id,
            fecha_inicio=fecha_inicio,
            fecha_fin=fecha_fin,
            creator_user_id=creator_user_id,
            activo=True,
        )
        session.add(record)
        await session.flush()
        await session.refresh(record)
        return record

    async def get_by_id(
        self,
        session: AsyncSession,
        activation_id: int,
    ) -> Optional[SurveyActivation]:
        """Programación por id, incluidas las borradas lógicamente."""
        stmt = select(SurveyActivation).where(SurveyActivation.id == activation_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_survey(
        self,
        session: AsyncSession,
        encuesta_id: int,
    ) -> Sequence[SurveyActivation]:
        """
        Programaciones activas de una encuesta, por fecha_inicio ascendente.
        """
        stmt = (
            select(SurveyActivation)
            .where(
                SurveyActivation.encuesta_id == encuesta_id,
                SurveyActivation.activo.is_(True),
            )
            .order_by(SurveyActivation.fecha_inicio.asc(), SurveyActivation.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_active(
        self,
        session: AsyncSession,
        *,
        with_survey: bool = False,
    ) -> Sequence[SurveyActivation]:
        """
        Todas las programaciones activas.

        Args:
            with_survey: Si True, carga también la encuesta de cada programación
        """
        stmt = (
            select(SurveyActivation)
            .where(SurveyActivation.activo.is_(True))
            .order_by(SurveyActivation.id.asc())
        )
        if with_survey:
            stmt = stmt.options(selectinload(SurveyActivation.encuesta))
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_active_for_survey_excluding(
        self,
        session: AsyncSession,
        encuesta_id: int,
        exclude_id: Optional[int] = None,
    ) -> Sequence[SurveyActivation]:
        """
        Programaciones activas de la encuesta salvo `exclude_id`.
        Lo usa el scheduler para saber si otra ventana sigue cubriendo el
        instante actual antes de desactivar.
        """
        stmt = select(SurveyActivation).where(
            SurveyActivation.encuesta_id == encuesta_id,
            SurveyActivation.activo.is_(True),
        )
        if exclude_id is not None:
            stmt = stmt.where(SurveyActivation.id != exclude_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update(
        self,
        session: AsyncSession,
        record: SurveyActivation,
        fields: dict[str, Any],
    ) -> SurveyActivation:
        """
        Aplica `fields` sobre la programación y hace flush.
        Solo se aceptan columnas editables.
        """
        for key in ("encuesta_id", "fecha_inicio", "fecha_fin", "activo", "creator_user_id"):
            if key in fields:
                setattr(record, key, fields[key])
        await session.flush()
        await session.refresh(record)
        return record

    async def soft_delete(
        self,
        session: AsyncSession,
        record: SurveyActivation,
    ) -> SurveyActivation:
        """Marca la programación como inactiva."""
        record.activo = False
        await session.flush()
        await session.refresh(record)
        return record


__all__ = ["ActivationRepository"]
# Fin del archivo encuestas/modules/activations/repositories/activation_repository.py
