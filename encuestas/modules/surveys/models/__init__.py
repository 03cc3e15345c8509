# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/models/__init__.py
"""

from .survey_models import Survey

__all__ = ["Survey"]
