"""Settings do processo que embarca a FSM.

Configurações de diagnóstico lidas do ambiente. A engine em si não lê
settings: cada Machine recebe seu sink explicitamente em define().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


@dataclass(frozen=True)
class EngineSettings:
    """Configurações de logging/diagnóstico.

    Attributes:
        log_level: Nível de log do processo (TRACE expõe cada passo do Spin)
        service_name: Nome do serviço para logs
    """

    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME

    @property
    def trace_enabled(self) -> bool:
        """Retorna True se as linhas de rastreamento do Spin serão emitidas."""
        return self.log_level.upper() == "TRACE"

    def validate(self) -> list[str]:
        """Valida configurações de diagnóstico.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"FSM_LOG_LEVEL inválido: {self.log_level}")

        if not self.service_name or not self.service_name.strip():
            errors.append("FSM_SERVICE_NAME não pode ser vazio")

        return errors


def _load_engine_from_env() -> EngineSettings:
    """Carrega EngineSettings de variáveis de ambiente."""
    return EngineSettings(
        log_level=os.getenv("FSM_LOG_LEVEL", "INFO").upper(),
        service_name=os.getenv("FSM_SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )


@lru_cache(maxsize=1)
def get_engine_settings() -> EngineSettings:
    """Retorna instância cacheada de EngineSettings."""
    return _load_engine_from_env()
