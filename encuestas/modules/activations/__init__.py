# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/__init__.py

Módulo de programaciones de activación de encuestas: modelo, repositorio,
scheduler de timers + verificación periódica, servicio y rutas.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""
