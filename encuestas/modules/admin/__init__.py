# -*- coding: utf-8 -*-
"""
encuestas/modules/admin/__init__.py

Endpoints operativos (monitoreo del scheduler).
"""
