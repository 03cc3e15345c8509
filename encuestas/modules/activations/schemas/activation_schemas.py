# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/schemas/activation_schemas.py

Schemas Pydantic para creación, actualización y respuesta de programaciones
de activación.

Los requests aceptan tanto snake_case como los nombres camelCase que usan
los clientes existentes (`encuestaId`, `fechaInicio`, `fechaFin`,
`creatorUserId`). Las fechas se normalizan a UTC; una fecha sin zona
horaria se interpreta como UTC.

La regla fecha_fin > fecha_inicio NO se valida aquí: la aplica el servicio
para responder 400 con el motivo (y porque en un PATCH la ventana final
depende también de lo ya persistido).

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, field_validator

from encuestas.shared.utils.base_models import UTF8SafeModel, Field
from encuestas.shared.utils.datetime_utils import as_utc


# ========== REQUEST SCHEMAS ==========

class ActivationCreateIn(UTF8SafeModel):
    """
    Request para crear una programación de activación.
    """
    encuesta_id: int = Field(..., alias="encuestaId", gt=0, description="ID de la encuesta")
    fecha_inicio: datetime = Field(..., alias="fechaInicio", description="Inicio de la ventana")
    fecha_fin: datetime = Field(..., alias="fechaFin", description="Fin de la ventana")
    creator_user_id: Optional[int] = Field(
        None,
        alias="creatorUserId",
        description="Usuario que crea la programación",
    )

    @field_validator("fecha_inicio", "fecha_fin")
    @classmethod
    def normalize_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "encuestaId": 12,
                "fechaInicio": "2026-11-01T08:00:00Z",
                "fechaFin": "2026-11-15T20:00:00Z",
            }
        }
    )


class ActivationUpdateIn(UTF8SafeModel):
    """Request para actualizar una programación (todos los campos opcionales)"""
    encuesta_id: Optional[int] = Field(None, alias="encuestaId", gt=0)
    fecha_inicio: Optional[datetime] = Field(None, alias="fechaInicio")
    fecha_fin: Optional[datetime] = Field(None, alias="fechaFin")
    creator_user_id: Optional[int] = Field(None, alias="creatorUserId")

    @field_validator("fecha_inicio", "fecha_fin")
    @classmethod
    def normalize_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def changes(self) -> dict:
        """Campos enviados explícitamente, sin los null."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


# ========== RESPONSE SCHEMAS ==========

class ActivationRead(UTF8SafeModel):
    """
    Programación de activación tal como se expone por la API.
    """
    id: int
    encuesta_id: int
    fecha_inicio: datetime
    fecha_fin: datetime
    activo: bool
    creator_user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("fecha_inicio", "fecha_fin", "created_at", "updated_at")
    @classmethod
    def normalize_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class ActivationResponse(UTF8SafeModel):
    """Response wrapper para operaciones de una sola programación"""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo")
    programacion: ActivationRead


class ActivationListResponse(UTF8SafeModel):
    """Response para el listado de programaciones de una encuesta"""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo")
    programaciones: List[ActivationRead]


class ActivationDeleteResponse(UTF8SafeModel):
    success: bool = True
    message: str


class VerifyStatesResponse(UTF8SafeModel):
    """Resultado de la verificación manual de estados"""
    success: bool = True
    message: str
    records_evaluated: int
    surveys_evaluated: int
    activated: int
    deactivated: int
    timestamp: datetime
    duration_ms: float


__all__ = [
    "ActivationCreateIn",
    "ActivationUpdateIn",
    "ActivationRead",
    "ActivationResponse",
    "ActivationListResponse",
    "ActivationDeleteResponse",
    "VerifyStatesResponse",
]

# Fin del archivo encuestas/modules/activations/schemas/activation_schemas.py
