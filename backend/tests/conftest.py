import pytest

from chatlog_analyzer.config.settings import (
    API_KEY_ENV_VARS,
    MODEL_ENV_VAR,
    RESPONSE_SCHEMA_PATH_ENV_VAR,
)


@pytest.fixture(autouse=True)
def clean_analyzer_env(monkeypatch):
    for name in (*API_KEY_ENV_VARS, MODEL_ENV_VAR, RESPONSE_SCHEMA_PATH_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
