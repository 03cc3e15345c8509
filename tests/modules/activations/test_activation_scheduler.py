# -*- coding: utf-8 -*-
"""
Tests del ActivationScheduler.

Cubre:
- Timers de frontera e inmediatos (escenarios de creación A-D)
- Cancelación idempotente y reprogramación sin timers duplicados
- Disparo de timers (incluye errores registrados y no propagados)
- Verificación completa: idempotencia, ventanas solapadas, ventana semiabierta
- Recarga de timers al arrancar
"""

import asyncio
import logging
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from encuestas.modules.activations.errors import InvalidActivationWindow
from encuestas.modules.activations.services import (
    ActivationScheduler,
    ActivationService,
    activate_job_id,
    deactivate_job_id,
)
from encuestas.modules.surveys.enums import SurveyState
from encuestas.shared.utils.datetime_utils import utcnow


def _job_ids(scheduler):
    return [job["id"] for job in scheduler.get_jobs()]


# ==================== ESCENARIOS DE CREACIÓN ====================

async def test_future_window_registers_both_timers_and_fires_in_order(
    service, scheduler, clock, make_survey, survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now + timedelta(seconds=1),
        fecha_fin=now + timedelta(seconds=5),
    )

    assert await survey_state(survey_id) == SurveyState.INACTIVA
    assert sorted(_job_ids(scheduler)) == sorted(
        [activate_job_id(record.id), deactivate_job_id(record.id)]
    )

    clock.advance(seconds=1)
    result = await scheduler.run_job_now(activate_job_id(record.id))
    assert result == SurveyState.ACTIVA
    assert await survey_state(survey_id) == SurveyState.ACTIVA

    clock.advance(seconds=4)
    result = await scheduler.run_job_now(deactivate_job_id(record.id))
    assert result == SurveyState.INACTIVA
    assert await survey_state(survey_id) == SurveyState.INACTIVA


async def test_current_window_activates_immediately_with_pending_deactivation(
    service, scheduler, clock, make_survey, survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=1),
        fecha_fin=now + timedelta(hours=1),
    )

    assert await survey_state(survey_id) == SurveyState.ACTIVA
    assert _job_ids(scheduler) == [deactivate_job_id(record.id)]
    job = scheduler.get_job(deactivate_job_id(record.id))
    assert job.trigger.run_date == now + timedelta(hours=1)


async def test_elapsed_window_deactivates_without_timers(
    service, scheduler, clock, make_survey, survey_state
):
    survey_id = await make_survey(estado=SurveyState.ACTIVA)
    now = clock()
    await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=2),
        fecha_fin=now - timedelta(hours=1),
    )

    assert await survey_state(survey_id) == SurveyState.INACTIVA
    assert scheduler.get_jobs() == []


@pytest.mark.parametrize("fin_offset", [timedelta(0), timedelta(hours=-1)])
async def test_invalid_window_is_rejected_without_side_effects(
    service, scheduler, clock, make_survey, fin_offset
):
    survey_id = await make_survey()
    inicio = clock() + timedelta(hours=1)

    with pytest.raises(InvalidActivationWindow):
        await service.create(
            encuesta_id=survey_id,
            fecha_inicio=inicio,
            fecha_fin=inicio + fin_offset,
        )

    assert await service.list_by_survey(survey_id) == []
    assert scheduler.get_jobs() == []


async def test_inactive_record_is_not_scheduled(
    activation_scheduler, scheduler, clock, make_survey, insert_record, survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await insert_record(
        survey_id, now - timedelta(hours=1), now + timedelta(hours=1), activo=False
    )

    await activation_scheduler.schedule_for_record(record)

    assert scheduler.get_jobs() == []
    assert await survey_state(survey_id) == SurveyState.INACTIVA


async def test_schedule_without_session_commits_immediate_change(
    activation_scheduler, clock, make_survey, insert_record, survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await insert_record(survey_id, now - timedelta(minutes=5), now + timedelta(minutes=5))

    await activation_scheduler.schedule_for_record(record)

    assert await survey_state(survey_id) == SurveyState.ACTIVA


async def test_immediate_apply_errors_propagate(
    activation_scheduler, clock, make_survey, insert_record
):
    survey_id = await make_survey()
    now = clock()
    record = await insert_record(survey_id, now - timedelta(minutes=5), now + timedelta(minutes=5))
    activation_scheduler._surveys.set_state = AsyncMock(side_effect=RuntimeError("db caída"))

    with pytest.raises(RuntimeError):
        await activation_scheduler.schedule_for_record(record)


# ==================== CANCELACIÓN / REPROGRAMACIÓN ====================

async def test_cancel_is_idempotent(service, activation_scheduler, scheduler, clock, make_survey):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now + timedelta(hours=1),
        fecha_fin=now + timedelta(hours=2),
    )

    removed = activation_scheduler.cancel_for_record(record.id)
    assert sorted(removed) == sorted([activate_job_id(record.id), deactivate_job_id(record.id)])
    assert activation_scheduler.cancel_for_record(record.id) == []
    assert activation_scheduler.cancel_for_record(9999) == []
    assert scheduler.get_jobs() == []


async def test_update_leaves_one_timer_of_each_kind(service, scheduler, clock, make_survey):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now + timedelta(hours=1),
        fecha_fin=now + timedelta(hours=2),
    )

    await service.update(record.id, {"fecha_inicio": now + timedelta(hours=3), "fecha_fin": now + timedelta(hours=4)})
    await service.update(record.id, {"fecha_fin": now + timedelta(hours=6)})

    ids = _job_ids(scheduler)
    assert ids.count(activate_job_id(record.id)) == 1
    assert ids.count(deactivate_job_id(record.id)) == 1
    assert scheduler.get_job(activate_job_id(record.id)).trigger.run_date == now + timedelta(hours=3)
    assert scheduler.get_job(deactivate_job_id(record.id)).trigger.run_date == now + timedelta(hours=6)


async def test_update_to_current_window_replaces_activate_timer_with_immediate_apply(
    service, scheduler, clock, make_survey, survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now + timedelta(hours=1),
        fecha_fin=now + timedelta(hours=2),
    )

    await service.update(record.id, {"fecha_inicio": now - timedelta(minutes=1)})

    assert await survey_state(survey_id) == SurveyState.ACTIVA
    assert _job_ids(scheduler) == [deactivate_job_id(record.id)]


async def test_soft_delete_removes_timers_and_reconcile_ignores_record(
    service, activation_scheduler, scheduler, clock, make_survey, survey_state, set_survey_state
):
    survey_id = await make_survey()
    now = clock()
    record = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=1),
        fecha_fin=now + timedelta(hours=1),
    )
    assert scheduler.get_jobs() != []

    await service.delete(record.id)
    assert scheduler.get_jobs() == []

    await set_survey_state(survey_id, SurveyState.INACTIVA)
    summary = await activation_scheduler.reconcile()

    assert summary["records_evaluated"] == 0
    assert await survey_state(survey_id) == SurveyState.INACTIVA


# ==================== DISPARO DE TIMERS ====================

async def test_deactivation_skipped_while_other_window_covers_now(
    service, scheduler, clock, make_survey, survey_state
):
    survey_id = await make_survey()
    now = clock()
    short = await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=1),
        fecha_fin=now + timedelta(minutes=30),
    )
    await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(minutes=10),
        fecha_fin=now + timedelta(hours=3),
    )

    clock.advance(minutes=30)
    result = await scheduler.run_job_now(deactivate_job_id(short.id))

    assert result is None
    assert await survey_state(survey_id) == SurveyState.ACTIVA


async def test_elapsed_record_does_not_deactivate_survey_covered_by_other(
    service, clock, make_survey, survey_state
):
    survey_id = await make_survey()
    now = clock()
    await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=1),
        fecha_fin=now + timedelta(hours=1),
    )
    await service.create(
        encuesta_id=survey_id,
        fecha_inicio=now - timedelta(hours=5),
        fecha_fin=now - timedelta(hours=4),
    )

    assert await survey_state(survey_id) == SurveyState.ACTIVA


async def test_fire_error_is_logged_and_swallowed(
    activation_scheduler, make_survey, caplog
):
    survey_id = await make_survey()
    activation_scheduler._surveys.set_state = AsyncMock(side_effect=RuntimeError("db caída"))

    with caplog.at_level(logging.ERROR):
        result = await activation_scheduler.fire(
            record_id=1, survey_id=survey_id, target_state=SurveyState.ACTIVA
        )

    assert result is None
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].exc_info is not None


async def test_fire_for_missing_survey_is_a_warning(activation_scheduler, caplog):
    with caplog.at_level(logging.WARNING):
        result = await activation_scheduler.fire(
            record_id=1, survey_id=424242, target_state="Activa"
        )

    assert result is None
    assert any("424242" in r.getMessage() for r in caplog.records)


async def test_timers_fire_on_running_scheduler(
    running_scheduler, session_factory, make_survey, survey_state
):
    """Timers reales: la ventana abre y cierra en segundos."""
    survey_id = await make_survey()
    real = ActivationScheduler(running_scheduler, session_factory)
    now = utcnow()

    async with session_factory() as session:
        await ActivationService(session, real).create(
            encuesta_id=survey_id,
            fecha_inicio=now + timedelta(seconds=0.5),
            fecha_fin=now + timedelta(seconds=1.5),
        )
    assert await survey_state(survey_id) == SurveyState.INACTIVA

    async def wait_for(expected, timeout=5.0):
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while loop.time() < deadline:
            if await survey_state(survey_id) == expected:
                return True
            await asyncio.sleep(0.05)
        return False

    assert await wait_for(SurveyState.ACTIVA)
    assert await wait_for(SurveyState.INACTIVA)
    assert running_scheduler.get_jobs() == []


# ==================== VERIFICACIÓN COMPLETA ====================

async def test_reconcile_fixes_drift_and_is_idempotent(
    activation_scheduler, clock, make_survey, insert_record, survey_state
):
    now = clock()
    to_activate = await make_survey()
    to_deactivate = await make_survey(estado=SurveyState.ACTIVA)
    await insert_record(to_activate, now - timedelta(hours=1), now + timedelta(hours=1))
    await insert_record(to_deactivate, now - timedelta(hours=3), now - timedelta(hours=2))

    first = await activation_scheduler.reconcile()
    assert first["records_evaluated"] == 2
    assert first["surveys_evaluated"] == 2
    assert first["activated"] == 1
    assert first["deactivated"] == 1
    assert first["timestamp"] == now
    assert await survey_state(to_activate) == SurveyState.ACTIVA
    assert await survey_state(to_deactivate) == SurveyState.INACTIVA

    second = await activation_scheduler.reconcile()
    assert second["activated"] == 0
    assert second["deactivated"] == 0


async def test_reconcile_any_covering_window_keeps_survey_active(
    activation_scheduler, clock, make_survey, insert_record, survey_state
):
    now = clock()
    survey_id = await make_survey(estado=SurveyState.ACTIVA)
    await insert_record(survey_id, now - timedelta(days=2), now - timedelta(days=1))
    await insert_record(survey_id, now - timedelta(hours=1), now + timedelta(hours=1))
    await insert_record(survey_id, now + timedelta(days=1), now + timedelta(days=2))

    summary = await activation_scheduler.reconcile()

    assert summary["surveys_evaluated"] == 1
    assert summary["deactivated"] == 0
    assert await survey_state(survey_id) == SurveyState.ACTIVA


async def test_reconcile_uses_half_open_window(
    activation_scheduler, clock, make_survey, insert_record, survey_state
):
    survey_id = await make_survey()
    inicio = clock() + timedelta(hours=1)
    fin = inicio + timedelta(hours=1)
    await insert_record(survey_id, inicio, fin)

    clock.set(inicio)
    await activation_scheduler.reconcile()
    assert await survey_state(survey_id) == SurveyState.ACTIVA

    clock.set(fin)
    await activation_scheduler.reconcile()
    assert await survey_state(survey_id) == SurveyState.INACTIVA


# ==================== RECARGA AL ARRANCAR ====================

async def test_reload_all_on_startup(
    activation_scheduler, scheduler, clock, make_survey, insert_record, survey_state
):
    now = clock()
    future_survey = await make_survey()
    current_survey = await make_survey()
    deleted_survey = await make_survey()
    future = await insert_record(future_survey, now + timedelta(hours=1), now + timedelta(hours=2))
    current = await insert_record(current_survey, now - timedelta(hours=1), now + timedelta(hours=1))
    await insert_record(deleted_survey, now - timedelta(hours=1), now + timedelta(hours=1), activo=False)

    result = await activation_scheduler.reload_all_on_startup()

    assert result == {"records": 2, "failed": 0}
    assert sorted(_job_ids(scheduler)) == sorted([
        activate_job_id(future.id),
        deactivate_job_id(future.id),
        deactivate_job_id(current.id),
    ])
    assert await survey_state(current_survey) == SurveyState.ACTIVA
    assert await survey_state(deleted_survey) == SurveyState.INACTIVA


async def test_reload_isolates_record_whose_state_write_fails(
    activation_scheduler, scheduler, clock, make_survey, insert_record, survey_state,
    monkeypatch, caplog,
):
    now = clock()
    broken_survey = await make_survey()
    healthy_survey = await make_survey()
    broken = await insert_record(broken_survey, now - timedelta(hours=1), now + timedelta(hours=1))
    healthy = await insert_record(healthy_survey, now - timedelta(hours=1), now + timedelta(hours=1))

    surveys = activation_scheduler._surveys
    original_set_state = surveys.set_state

    async def _set_state_with_invalid_row(session, encuesta_id, estado):
        if encuesta_id == broken_survey:
            survey = await surveys.get_by_id(session, encuesta_id)
            survey.titulo = None
            await session.flush()
        return await original_set_state(session, encuesta_id, estado)

    monkeypatch.setattr(surveys, "set_state", _set_state_with_invalid_row)

    with caplog.at_level(logging.ERROR):
        result = await activation_scheduler.reload_all_on_startup()

    assert result == {"records": 1, "failed": 1}
    assert await survey_state(healthy_survey) == SurveyState.ACTIVA
    assert await survey_state(broken_survey) == SurveyState.INACTIVA
    assert _job_ids(scheduler) == [deactivate_job_id(healthy.id)]
    assert any(str(broken.id) in r.getMessage() for r in caplog.records if r.levelno == logging.ERROR)
