# -*- coding: utf-8 -*-
"""
encuestas/modules/activations/routes/activation_routes.py

Rutas de programaciones de activación de encuestas:
- Listar por encuesta
- Obtener por ID
- Crear / actualizar / eliminar (borrado lógico)
- Verificar estados ahora (ejecuta la verificación completa)

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from fastapi import APIRouter, Depends, status

from encuestas.modules.activations.errors import (
    ActivationNotFound,
    InvalidActivationWindow,
    SurveyNotFound,
)
from encuestas.modules.activations.routes.deps import get_activation_service
from encuestas.modules.activations.schemas import (
    ActivationCreateIn,
    ActivationDeleteResponse,
    ActivationListResponse,
    ActivationRead,
    ActivationResponse,
    ActivationUpdateIn,
    VerifyStatesResponse,
)
from encuestas.modules.activations.services import ActivationService
from encuestas.shared.utils.http_exceptions import BadRequestException, NotFoundException

router = APIRouter(prefix="/encuestas-activacion", tags=["encuestas-activacion"])


def _to_http(exc: Exception):
    if isinstance(exc, InvalidActivationWindow):
        return BadRequestException(str(exc))
    return NotFoundException(str(exc))


# Declarada antes de "/{activation_id}" para que no la capture el path param
@router.post(
    "/verificar",
    response_model=VerifyStatesResponse,
    summary="Verificar estados de encuestas ahora",
)
async def verify_states(
    svc: ActivationService = Depends(get_activation_service),
):
    """
    Ejecuta la verificación completa de estados y devuelve el resumen.
    """
    result = await svc.verify_now()
    return VerifyStatesResponse(success=True, **result)


@router.get(
    "/encuesta/{encuesta_id}",
    response_model=ActivationListResponse,
    summary="Listar programaciones de una encuesta",
)
async def list_by_survey(
    encuesta_id: int,
    svc: ActivationService = Depends(get_activation_service),
):
    records = await svc.list_by_survey(encuesta_id)
    return ActivationListResponse(
        success=True,
        message="Programaciones obtenidas correctamente",
        programaciones=[ActivationRead.model_validate(r) for r in records],
    )


@router.get(
    "/{activation_id}",
    response_model=ActivationResponse,
    summary="Obtener programación por ID",
)
async def get_activation(
    activation_id: int,
    svc: ActivationService = Depends(get_activation_service),
):
    try:
        record = await svc.get_by_id(activation_id)
    except ActivationNotFound as e:
        raise _to_http(e)
    return ActivationResponse(
        success=True,
        message="Programación obtenida correctamente",
        programacion=ActivationRead.model_validate(record),
    )


@router.post(
    "",
    response_model=ActivationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear programación de activación",
)
async def create_activation(
    payload: ActivationCreateIn,
    svc: ActivationService = Depends(get_activation_service),
):
    """
    Crea la programación y registra sus timers (o aplica el estado de
    inmediato si la ventana ya empezó o ya terminó).
    """
    try:
        record = await svc.create(
            encuesta_id=payload.encuesta_id,
            fecha_inicio=payload.fecha_inicio,
            fecha_fin=payload.fecha_fin,
            creator_user_id=payload.creator_user_id,
        )
    except (InvalidActivationWindow, SurveyNotFound) as e:
        raise _to_http(e)
    return ActivationResponse(
        success=True,
        message="Programación creada correctamente",
        programacion=ActivationRead.model_validate(record),
    )


@router.patch(
    "/{activation_id}",
    response_model=ActivationResponse,
    summary="Actualizar programación",
)
async def update_activation(
    activation_id: int,
    payload: ActivationUpdateIn,
    svc: ActivationService = Depends(get_activation_service),
):
    try:
        record = await svc.update(activation_id, payload.changes())
    except (ActivationNotFound, InvalidActivationWindow, SurveyNotFound) as e:
        raise _to_http(e)
    return ActivationResponse(
        success=True,
        message="Programación actualizada correctamente",
        programacion=ActivationRead.model_validate(record),
    )


@router.delete(
    "/{activation_id}",
    response_model=ActivationDeleteResponse,
    summary="Eliminar programación (borrado lógico)",
)
async def delete_activation(
    activation_id: int,
    svc: ActivationService = Depends(get_activation_service),
):
    try:
        await svc.delete(activation_id)
    except ActivationNotFound as e:
        raise _to_http(e)
    return ActivationDeleteResponse(success=True, message="Programación eliminada correctamente")


# Fin del archivo encuestas/modules/activations/routes/activation_routes.py
