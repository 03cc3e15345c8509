# -*- coding: utf-8 -*-
import os

import pytest

from encuestas.shared.config.config_loader import get_settings

_PREFIXES = ("DB_", "CORS_", "APP_", "LOG_", "SCHEDULER_", "ACTIVATION_")


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia el caché de get_settings() en cada test.
    """
    for k in list(os.environ.keys()):
        if k.startswith(_PREFIXES):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
