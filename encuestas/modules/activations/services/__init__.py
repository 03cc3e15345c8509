# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/services/__init__.py
"""

from .activation_scheduler import (
    ActivationScheduler,
    activate_job_id,
    deactivate_job_id,
    window_covers,
)
from .activation_service import ActivationService, validate_window

__all__ = [
    "ActivationScheduler",
    "ActivationService",
    "activate_job_id",
    "deactivate_job_id",
    "window_covers",
    "validate_window",
]
