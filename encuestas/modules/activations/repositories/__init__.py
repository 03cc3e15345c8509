# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/repositories/__init__.py
"""

from .activation_repository import ActivationRepository

__all__ = ["ActivationRepository"]
