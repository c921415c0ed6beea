import pytest

from geoprecision.domain.values import ModelKind, PrecisionModel
from geoprecision.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_defaults_to_floating_model():
    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert s.DEFAULT_MODEL_KIND is ModelKind.FLOATING
    assert s.default_precision_model() == PrecisionModel()


def test_settings_fixed_model_from_env(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEFAULT_MODEL_KIND", "fixed")
    monkeypatch.setenv("DEFAULT_SCALE", "-0.001")

    # When
    s = get_settings()

    # Then
    assert s.DEFAULT_MODEL_KIND is ModelKind.FIXED
    assert s.default_precision_model() == PrecisionModel.fixed(1000)
    assert s.default_precision_model().explicit_grid_size == 0.001


def test_settings_floating_single_from_env(monkeypatch):
    _reset_settings_cache()
    monkeypatch.setenv("DEFAULT_MODEL_KIND", "FLOATING SINGLE")

    assert get_settings().DEFAULT_MODEL_KIND is ModelKind.FLOATING_SINGLE


def test_settings_rejects_invalid_log_level(monkeypatch):
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_unknown_kind(monkeypatch):
    _reset_settings_cache()
    monkeypatch.setenv("DEFAULT_MODEL_KIND", "DOUBLE")

    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_zero_scale_for_fixed(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEFAULT_MODEL_KIND", "FIXED")
    monkeypatch.setenv("DEFAULT_SCALE", "0")

    # When & Then
    with pytest.raises(Exception):
        get_settings()
