# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/enums/__init__.py
"""

from .survey_state_enum import SurveyState

__all__ = ["SurveyState"]
