import logging

import pytest

from kaltura_params.utils import setup_logging
from kaltura_params.config import SettingsManager


@pytest.fixture(scope="session", autouse=True)
def configure_logging_fixture():
    setup_logging(logging.DEBUG)
    yield


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    for name in ("ENVIRONMENT", "KS", "LANGUAGE", "CURRENCY", "USER_ID", "DUPLICATE_KEY_POLICY"):
        monkeypatch.delenv(f"KALTURA_{name}", raising=False)
    SettingsManager.reset()
    yield
    SettingsManager.reset()
