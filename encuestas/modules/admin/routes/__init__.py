# -*- coding: utf-8 -*-
"""
encuestas/modules/admin/routes/__init__.py
"""

from .scheduler_routes import router as scheduler_router

__all__ = ["scheduler_router"]
