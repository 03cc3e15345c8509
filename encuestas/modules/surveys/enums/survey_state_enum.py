# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/enums/survey_state_enum.py

Estado de publicación de una encuesta. Es el único campo de la encuesta
que modifica el scheduler de activaciones.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from enum import StrEnum


class SurveyState(StrEnum):
    """
    Valores persistidos tal cual en la columna `estado`:
    - ACTIVA: la encuesta acepta respuestas.
    - INACTIVA: la encuesta no está disponible.
    """
    ACTIVA = "Activa"
    INACTIVA = "Inactiva"


__all__ = ["SurveyState"]
# Fin del archivo encuestas/modules/surveys/enums/survey_state_enum.py
