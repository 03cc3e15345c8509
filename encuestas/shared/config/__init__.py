# -*- coding: utf-8 -*-
"""
encuestas/shared/config/__init__.py

Punto único de acceso a la configuración:
    from encuestas.shared.config import settings

`settings` es un proxy perezoso: la instancia real (según PYTHON_ENV) se
construye en el primer acceso a un atributo, no al importar el módulo.
Así los tests pueden ajustar variables de entorno antes de la carga.
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .logging_config import setup_logging


class _SettingsProxy:
    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy {type(get_settings()).__name__}>"


settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "setup_logging"]
# Fin del archivo
