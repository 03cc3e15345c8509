# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/models/activation_models.py

Programación de activación de una encuesta: ventana [fecha_inicio, fecha_fin)
durante la cual la encuesta debe estar Activa. Una encuesta puede tener
varias programaciones; el borrado es lógico (`activo = False`).

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, true

from encuestas.shared.database import Base


class SurveyActivation(Base):
    """
    Programación de activación.

    - fecha_inicio / fecha_fin: límites de la ventana (UTC)
    - activo: False tras borrado lógico; las programaciones inactivas no
      generan timers ni cuentan en la verificación de estados
    - creator_user_id: id opaco del usuario que creó la programación
    """

    __tablename__ = "encuestas_activacion"

    id = Column(Integer, primary_key=True, autoincrement=True)
    encuesta_id = Column(
        Integer,
        ForeignKey("encuestas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fecha_inicio = Column(DateTime(timezone=True), nullable=False)
    fecha_fin = Column(DateTime(timezone=True), nullable=False)
    activo = Column(Boolean, nullable=False, default=True, server_default=true())
    creator_user_id = Column(Integer, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    encuesta = relationship("Survey", lazy="raise")

    __table_args__ = (
        CheckConstraint("fecha_fin > fecha_inicio", name="rango_fechas"),
        Index("ix_encuestas_activacion_encuesta_activo", "encuesta_id", "activo"),
    )

    def __repr__(self):
        return (
            f"<SurveyActivation(id={self.id}, encuesta_id={self.encuesta_id}, "
            f"inicio={self.fecha_inicio}, fin={self.fecha_fin}, activo={self.activo})>"
        )


__all__ = ["SurveyActivation"]
# Fin del archivo encuestas/modules/activations/models/activation_models.py
