# -*- coding: utf-8 -*-
"""
encuestas/modules/surveys/__init__.py

Módulo Surveys: entidad referenciada por las programaciones de activación.
Solo expone el modelo, el enum de estado y su repositorio.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""
