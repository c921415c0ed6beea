import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_MODEL_KIND", "FLOATING")
    monkeypatch.setenv("DEFAULT_SCALE", "1.0")

    from geoprecision.shared.config import get_settings

    get_settings.cache_clear()
