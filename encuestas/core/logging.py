# -*- coding: utf-8 -*-
"""
encuestas/core/logging.py

Fachada de `encuestas.shared.config.logging_config` para mantener un
punto de entrada único bajo `encuestas.core`.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from typing import Literal

from encuestas.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo encuestas/core/logging.py
