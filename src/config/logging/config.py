"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (service, level, logger, message)
- Nível TRACE para o rastreamento passo a passo da FSM
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo que embarca a FSM
    configure_logging(level="TRACE", service_name="fsm")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.log(TRACE, "FSM: process input [%d][%s]", 1, "start")
"""

from __future__ import annotations

import logging

from config.logging.filters import ServiceNameFilter
from config.logging.formatters import create_json_formatter
from fsm.diagnostics.sink import TRACE

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "fsm"


def resolve_level(level: str) -> int:
    """Converte o nome de um nível para o valor numérico do logging.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return logging.getLevelNamesMapping()[level_upper]


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Configura logging JSON estruturado para o processo.

    Deve ser chamada uma vez na inicialização (ver config.bootstrap).

    Args:
        level: Nível de log (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    numeric_level = resolve_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceNameFilter(service_name))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O logger retornado serve como sink de diagnóstico de uma Machine
    (ver fsm.diagnostics.DiagnosticSink).

    Args:
        name: Nome do logger (geralmente __name__).

    Returns:
        Logger configurado.
    """
    return logging.getLogger(name)
