# -*- coding: utf-8 -*-
"""
encuestas/shared/scheduler/jobs/__init__.py

Jobs programados del sistema.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from .activation_reconcile_job import (
    JOB_ID as ACTIVATION_RECONCILE_JOB_ID,
    register_activation_reconcile_job,
    run_activation_reconcile,
)

__all__ = [
    "ACTIVATION_RECONCILE_JOB_ID",
    "register_activation_reconcile_job",
    "run_activation_reconcile",
]
