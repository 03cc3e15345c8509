# -*- coding: utf-8 -*-
"""
encuestas/shared/__init__.py

Infraestructura compartida: configuración, base de datos, scheduler y
utilidades HTTP.
"""
