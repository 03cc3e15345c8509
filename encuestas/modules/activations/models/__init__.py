# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/models/__init__.py
"""

# Survey debe estar mapeado antes de resolver la relación `encuesta`
from encuestas.modules.surveys.models import Survey  # noqa: F401
from .activation_models import SurveyActivation

__all__ = ["SurveyActivation"]
