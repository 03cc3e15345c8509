# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/models/survey_models.py

Modelo SQLAlchemy de la encuesta. Solo se mapean los campos que usa el
backend de activaciones; el resto del esquema (preguntas, respuestas,
asignaciones) vive en otros servicios.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func, true

from encuestas.shared.database import Base, as_db_enum
from encuestas.modules.surveys.enums import SurveyState


class Survey(Base):
    """
    Encuesta.

    - estado (SurveyState): Activa/Inactiva, lo gobiernan las programaciones
      de activación (timers + verificación de respaldo).
    - activo: borrado lógico de la propia encuesta.
    """

    __tablename__ = "encuestas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)

    estado = Column(
        as_db_enum(SurveyState, name="survey_state_enum"),
        nullable=False,
        default=SurveyState.INACTIVA,
        server_default=SurveyState.INACTIVA.value,
        index=True,
    )
    activo = Column(Boolean, nullable=False, default=True, server_default=true())

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

    def __repr__(self):
        return f"<Survey(id={self.id}, titulo='{self.titulo}', estado={self.estado})>"


__all__ = ["Survey"]
# Fin del archivo encuestas/modules/surveys/models/survey_models.py
