# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/repositories/__init__.py
"""

from .survey_repository import SurveyRepository

__all__ = ["SurveyRepository"]
