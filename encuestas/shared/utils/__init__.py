# -*- coding: utf-8 -*-
"""
encuestas/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from .base_models import UTF8SafeModel, Field
from .datetime_utils import as_utc, utcnow
from .http_exceptions import (
    BadRequestException,
    NotFoundException,
    InternalServerException,
)
from .json_response import UTF8JSONResponse, json_response_utf8

__all__ = [
    "UTF8SafeModel",
    "Field",
    "as_utc",
    "utcnow",
    "BadRequestException",
    "NotFoundException",
    "InternalServerException",
    "UTF8JSONResponse",
    "json_response_utf8",
]
