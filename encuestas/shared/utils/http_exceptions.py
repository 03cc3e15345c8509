# -*- coding: utf-8 -*-
"""
encuestas/shared/utils/http_exceptions.py

Excepciones HTTP de la API de Encuestas.
Estandariza respuestas de error con códigos HTTP apropiados.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class BadRequestException(HTTPException):
    """400 - Solicitud mal formada o parámetros inválidos"""
    def __init__(
        self,
        detail: str = "Solicitud inválida",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            headers=headers
        )


class NotFoundException(HTTPException):
    """404 - Recurso no encontrado"""
    def __init__(
        self,
        detail: str = "Recurso no encontrado",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            headers=headers
        )


class InternalServerException(HTTPException):
    """500 - Error interno no recuperable en la petición"""
    def __init__(
        self,
        detail: str = "Error interno del servidor",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            headers=headers
        )


__all__ = [
    "BadRequestException",
    "NotFoundException",
    "InternalServerException",
]

# Fin del archivo encuestas/shared/utils/http_exceptions.py
