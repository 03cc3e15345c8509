# -*- coding: utf-8 -*-
"""
tests/conftest.py

Config global de tests del backend de Encuestas.

- Fuerza PYTHON_ENV=test y una BD SQLite temporal ANTES de importar el
  paquete (el engine de la aplicación se crea al importar).
- Cada test de servicio usa su propio archivo SQLite (tmp_path) con
  NullPool, igual que el engine de la aplicación.
- El SchedulerService de los tests unitarios se deja detenido: los timers
  quedan registrados como pendientes y se disparan a mano con
  `run_job_now`, con un reloj congelado inyectado en ActivationScheduler.
"""

import os
import pathlib
import tempfile
from datetime import datetime, timedelta, timezone

# ============================================================
# Entorno de pruebas (antes de cualquier import de `encuestas`)
# ============================================================
_APP_DB = pathlib.Path(tempfile.gettempdir()) / f"encuestas_app_test_{os.getpid()}.db"
os.environ["PYTHON_ENV"] = "test"
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_APP_DB}"
os.environ["DB_CREATE_ALL"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from encuestas.shared.database import Base
from encuestas.shared.scheduler import SchedulerService
from encuestas.modules.surveys.enums import SurveyState
from encuestas.modules.surveys.models import Survey
from encuestas.modules.surveys.repositories import SurveyRepository
from encuestas.modules.activations.models import SurveyActivation
from encuestas.modules.activations.services import ActivationScheduler, ActivationService


BASE_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Reloj controlable para ActivationScheduler."""

    def __init__(self, now: datetime = BASE_NOW):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current

    def set(self, value: datetime) -> None:
        self.current = value


def pytest_sessionfinish(session, exitstatus):
    if _APP_DB.exists():
        _APP_DB.unlink()


# -----------------------------------------------------------------------------
# Base de datos por test
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine(tmp_path):
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'encuestas.db'}",
        poolclass=NullPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


# -----------------------------------------------------------------------------
# Scheduler
# -----------------------------------------------------------------------------
@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
async def scheduler():
    """SchedulerService detenido: los jobs quedan pendientes e inspeccionables."""
    svc = SchedulerService()
    yield svc
    svc.shutdown(wait=False)


@pytest.fixture
async def running_scheduler():
    svc = SchedulerService()
    svc.start()
    yield svc
    svc.shutdown(wait=False)


@pytest.fixture
def activation_scheduler(scheduler, session_factory, clock):
    return ActivationScheduler(scheduler, session_factory, clock=clock)


@pytest.fixture
def service(db, activation_scheduler):
    return ActivationService(db, activation_scheduler)


# -----------------------------------------------------------------------------
# Helpers de datos
# -----------------------------------------------------------------------------
@pytest.fixture
def make_survey(session_factory):
    async def _make(estado: SurveyState = SurveyState.INACTIVA, titulo: str = "Encuesta de prueba") -> int:
        async with session_factory() as session:
            survey = Survey(titulo=titulo, estado=estado)
            session.add(survey)
            await session.commit()
            return survey.id
    return _make


@pytest.fixture
def insert_record(session_factory):
    """Inserta una programación directamente, sin programar timers."""
    async def _insert(encuesta_id: int, inicio: datetime, fin: datetime, activo: bool = True) -> SurveyActivation:
        async with session_factory() as session:
            record = SurveyActivation(
                encuesta_id=encuesta_id,
                fecha_inicio=inicio,
                fecha_fin=fin,
                activo=activo,
            )
            session.add(record)
            await session.commit()
            return record
    return _insert


@pytest.fixture
def survey_state(session_factory):
    async def _state(encuesta_id: int) -> SurveyState:
        async with session_factory() as session:
            return await SurveyRepository().get_state(session, encuesta_id)
    return _state


@pytest.fixture
def set_survey_state(session_factory):
    async def _set(encuesta_id: int, estado: SurveyState) -> None:
        async with session_factory() as session:
            await SurveyRepository().set_state(session, encuesta_id, estado)
            await session.commit()
    return _set

# Fin del archivo tests/conftest.py
