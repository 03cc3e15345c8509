# -*- coding: utf-8 -*-
"""
encuestas/shared/database/database.py

SQLAlchemy async: asyncpg para PostgreSQL y aiosqlite para SQLite
(desarrollo local y pruebas).

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencias FastAPI: get_async_session / get_db
- check_database_health()
- init_models() para crear tablas cuando DB_CREATE_ALL=true

Autor: Equipo Encuestas
Fecha: 2026-10-19
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from encuestas.shared.config import settings
from encuestas.shared.database.base import Base

logger = logging.getLogger(__name__)


def build_ssl_context() -> ssl.SSLContext:
    """SSLContext con verificación estándar para conexiones TLS a Postgres."""
    ctx = ssl.create_default_context(purpose=ssl.Purpose.SERVER_AUTH)
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED
    return ctx


def _engine_kwargs(url: str) -> Dict[str, Any]:
    """
    Argumentos de create_async_engine según el dialecto.

    - SQLite: sin pool propio (NullPool); cada sesión abre su conexión.
    - PostgreSQL/asyncpg: NullPool (el pooling lo hace PgBouncer),
      timeouts de conexión/consulta y TLS según DB_SSLMODE.
    """
    kwargs: Dict[str, Any] = {
        "echo": bool(settings.db_echo_sql),
        "poolclass": NullPool,
    }
    if url.startswith("sqlite"):
        return kwargs

    connect_args: Dict[str, Any] = {
        "statement_cache_size": 0,
        "timeout": float(settings.db_connect_timeout_s),
        "command_timeout": float(settings.db_command_timeout_s),
        "server_settings": {"search_path": "public"},
    }
    if settings.db_sslmode == "require":
        connect_args["ssl"] = build_ssl_context()
    elif settings.db_sslmode == "disable":
        connect_args["ssl"] = False
    kwargs["connect_args"] = connect_args
    return kwargs


def create_engine_from_settings() -> AsyncEngine:
    url = settings.database_url
    safe_target = url.split("@")[-1] if "@" in url else url
    logger.info("[DB] Engine → %s (echo=%s)", safe_target, settings.db_echo_sql)
    return create_async_engine(url, **_engine_kwargs(url))


engine = create_engine_from_settings()

SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencias FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_async_session():
        yield session


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except Exception as e:
        logger.warning("[DB] Health check falló: %s", e)
        return False


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Crea las tablas registradas en Base.metadata (idempotente)."""
    # Registrar modelos en la metadata antes de create_all
    import encuestas.modules.surveys.models  # noqa: F401
    import encuestas.modules.activations.models  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Tablas verificadas/creadas: %s", sorted(Base.metadata.tables))


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_async_session",
    "get_db",
    "check_database_health",
    "init_models",
]
# Fin del archivo encuestas/shared/database/database.py
