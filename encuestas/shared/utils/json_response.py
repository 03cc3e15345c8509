# -*- coding: utf-8 -*-
"""
encuestas/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito (acentos en mensajes:
"Programación", "Verificación"...).

    app = FastAPI(default_response_class=UTF8JSONResponse)

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(
        content=content,
        status_code=status_code,
        headers=headers,
    )


__all__ = ["UTF8JSONResponse", "json_response_utf8"]
