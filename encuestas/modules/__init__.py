# -*- coding: utf-8 -*-
"""
encuestas/modules/__init__.py

Módulos de dominio: surveys, activations, admin.
"""
