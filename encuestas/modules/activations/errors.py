# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/errors.py

Excepciones de dominio del módulo de activaciones.
Las rutas las traducen a BadRequestException / NotFoundException.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""


class ActivationNotFound(Exception):
    """Se lanza cuando no existe la programación solicitada."""
    def __init__(self, activation_id):
        self.activation_id = activation_id
        super().__init__(f"Programación de activación no encontrada: {activation_id}")


class SurveyNotFound(Exception):
    """Se lanza cuando la encuesta referenciada no existe."""
    def __init__(self, encuesta_id):
        self.encuesta_id = encuesta_id
        super().__init__(f"Encuesta no encontrada: {encuesta_id}")


class InvalidActivationWindow(Exception):
    """Se lanza cuando fecha_fin no es posterior a fecha_inicio."""
    def __init__(self, fecha_inicio, fecha_fin, message=None):
        self.fecha_inicio = fecha_inicio
        self.fecha_fin = fecha_fin
        default_msg = (
            "La fecha de fin debe ser posterior a la fecha de inicio "
            f"({fecha_inicio} → {fecha_fin})"
        )
        super().__init__(message or default_msg)


__all__ = [
    "ActivationNotFound",
    "SurveyNotFound",
    "InvalidActivationWindow",
]

# Fin del archivo encuestas/modules/activations/errors.py
