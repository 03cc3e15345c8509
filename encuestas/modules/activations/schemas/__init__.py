# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/schemas/__init__.py
"""

from .activation_schemas import (
    ActivationCreateIn,
    ActivationUpdateIn,
    ActivationRead,
    ActivationResponse,
    ActivationListResponse,
    ActivationDeleteResponse,
    VerifyStatesResponse,
)

__all__ = [
    "ActivationCreateIn",
    "ActivationUpdateIn",
    "ActivationRead",
    "ActivationResponse",
    "ActivationListResponse",
    "ActivationDeleteResponse",
    "VerifyStatesResponse",
]
