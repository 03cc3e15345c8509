# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/routes/__init__.py
"""

from .activation_routes import router

__all__ = ["router"]
