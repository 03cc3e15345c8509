# -*- coding: utf-8 -*-
"""
encuestas/shared/utils/base_models.py

Modelo base para esquemas Pydantic de la API.

Incluye:
- Eliminación automática de espacios en campos de texto
- Modo de atributos para construir desde objetos ORM (`from_attributes`)
- `populate_by_name` para aceptar tanto el nombre del campo como su alias
  (los clientes existentes envían camelCase: `fechaInicio`, `encuestaId`)

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from pydantic import BaseModel, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["UTF8SafeModel", "Field"]
# Fin del archivo base_models.py
