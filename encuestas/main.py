# -*- coding: utf-8 -*-
"""
encuestas/main.py

Punto de entrada principal del backend de Encuestas (activaciones).

Ajustes clave:
- Uso de encuestas.core.settings como fachada de configuración.
- El SchedulerService y el ActivationScheduler se crean en el lifespan y se
  guardan en `app.state`; no hay singletons de módulo.
- Arranque: creación de tablas opcional (DB_CREATE_ALL), registro de la
  verificación periódica, inicio del scheduler y recarga explícita de los
  timers de todas las programaciones activas.
- Compatibilidad Windows con asyncio.WindowsSelectorEventLoopPolicy
- Health principal /health delegado al paquete encuestas.routes

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

import sys
import asyncio

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de construir la configuración
# En producción no se sobreescriben variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import anyio
import uvicorn

from encuestas import __version__
from encuestas.core.settings import get_settings
from encuestas.core.logging import setup_logging
from encuestas.core.db import SessionLocal, init_models
from encuestas.modules.activations.services import ActivationScheduler
from encuestas.shared.scheduler import SchedulerService
from encuestas.shared.scheduler.jobs import register_activation_reconcile_job
from encuestas.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

logger.info(f"[dotenv] {_ENV_PATH} (PYTHON_ENV={_PYTHON_ENV})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()

    if settings.db_create_all:
        await init_models()

    scheduler = SchedulerService(
        timezone=settings.scheduler_timezone,
        misfire_grace_time=settings.scheduler_misfire_grace_time,
    )
    activation_scheduler = ActivationScheduler(scheduler, SessionLocal)
    app.state.scheduler = scheduler
    app.state.activation_scheduler = activation_scheduler

    register_activation_reconcile_job(
        scheduler,
        activation_scheduler,
        interval_minutes=settings.activation_reconcile_interval_minutes,
    )
    scheduler.start()
    logger.info("Scheduler iniciado con jobs programados")

    if settings.activation_reload_on_startup:
        try:
            await activation_scheduler.reload_all_on_startup()
        except Exception as e:
            # La verificación periódica corrige los estados pendientes
            logger.warning(f"No se pudieron recargar las programaciones: {e}", exc_info=True)

    logger.info("Backend de Encuestas iniciado.")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("Iniciando shutdown ordenado...")
        with anyio.CancelScope(shield=True):
            try:
                scheduler.shutdown(wait=False)
                logger.info("Scheduler detenido")
            except Exception as e:
                logger.warning(f"Error deteniendo scheduler: {e}")
        logger.info("Backend de Encuestas apagado.")


openapi_tags = [
    {"name": "encuestas-activacion", "description": "Programaciones de activación de encuestas"},
    {"name": "admin-scheduler", "description": "Monitoreo del scheduler"},
]

app = FastAPI(
    title="Encuestas API",
    description="Programación de activación de encuestas",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,
)


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS middleware.

    Returns:
        dict con la configuración aplicada para logging.
    """
    origins_list = settings.get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        # "*" con allow_credentials=True es inválido en navegadores
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["*"] if is_wildcard_only else ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info(f"CORS habilitado: origins={origins_list}")
    return cors_config


_cors_config = _configure_cors(app)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    HTTPException con charset UTF-8 en el JSON (mensajes con acentos).
    """
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


from encuestas.routes import router as main_router

app.include_router(main_router)


@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    uvicorn.run(
        "encuestas.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
        log_level=settings.log_level.lower(),
    )

# Fin del archivo encuestas/main.py
