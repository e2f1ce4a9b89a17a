"""Testes para config.settings e config.bootstrap."""

from __future__ import annotations

import logging

import pytest

from config.bootstrap import initialize_logging
from config.logging import TRACE
from config.settings import EngineSettings, get_engine_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_engine_settings.cache_clear()
    yield
    get_engine_settings.cache_clear()


class TestEngineSettings:
    """Testes para EngineSettings."""

    def test_defaults_are_valid(self) -> None:
        """Valores padrão passam na validação."""
        settings = EngineSettings()
        assert settings.log_level == "INFO"
        assert settings.service_name == "fsm"
        assert settings.trace_enabled is False
        assert settings.validate() == []

    def test_invalid_level_and_empty_service_are_reported(self) -> None:
        """Erros de validação são acumulados, não levantados."""
        errors = EngineSettings(log_level="LOUD", service_name=" ").validate()
        assert len(errors) == 2
        assert any("FSM_LOG_LEVEL" in e for e in errors)
        assert any("FSM_SERVICE_NAME" in e for e in errors)

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings são lidas de FSM_LOG_LEVEL e FSM_SERVICE_NAME."""
        monkeypatch.setenv("FSM_LOG_LEVEL", "trace")
        monkeypatch.setenv("FSM_SERVICE_NAME", "pedidos")

        settings = get_engine_settings()

        assert settings.log_level == "TRACE"
        assert settings.service_name == "pedidos"
        assert settings.trace_enabled is True

    def test_getter_is_cached(self) -> None:
        """get_engine_settings devolve a mesma instância."""
        assert get_engine_settings() is get_engine_settings()


class TestInitializeLogging:
    """Testes para initialize_logging."""

    def test_applies_explicit_settings(self) -> None:
        """Settings explícitas configuram o root logger."""
        applied = initialize_logging(EngineSettings(log_level="TRACE", service_name="boot"))
        assert applied.service_name == "boot"
        assert logging.getLogger().level == TRACE

    def test_uses_env_settings_when_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem argumento, usa as settings do ambiente."""
        monkeypatch.setenv("FSM_LOG_LEVEL", "WARNING")
        applied = initialize_logging()
        assert applied.log_level == "WARNING"
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_settings_raise(self) -> None:
        """Settings inválidas falham rápido."""
        with pytest.raises(ValueError, match="Settings inválidas"):
            initialize_logging(EngineSettings(log_level="LOUD"))
