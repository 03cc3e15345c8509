# -*- coding: utf-8 -*-
"""
encuestas/core/settings.py

Fachada de configuración. Reexpone la carga de settings basada en
Pydantic v2 definida en `encuestas.shared.config`.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from encuestas.shared.config.config_loader import get_settings as _get_settings
from encuestas.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    return _get_settings()

# Fin del archivo encuestas/core/settings.py
