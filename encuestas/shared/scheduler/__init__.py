# -*- coding: utf-8 -*-
"""
encuestas/shared/scheduler/__init__.py

Tareas programadas y timers usando APScheduler.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from .scheduler_service import SchedulerService

__all__ = [
    "SchedulerService",
]
