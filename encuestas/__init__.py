# -*- coding: utf-8 -*-
"""
encuestas/__init__.py

Paquete principal del backend de Encuestas.

- Asegura un event loop compatible con asyncpg/aiosqlite en Windows.
- Permite importar los módulos internos como 'encuestas.*'.

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""
import sys
import asyncio

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

__version__ = "1.0.0"

# Fin del archivo encuestas/__init__.py
