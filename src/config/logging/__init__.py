"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import TRACE, configure_logging, get_logger

    # Na inicialização (config.bootstrap)
    configure_logging(level="INFO", service_name="fsm")

    # Como sink de diagnóstico de uma Machine
    machine = define(*states, sink=get_logger("pedidos.fsm"))

Campos obrigatórios em todo log:
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import (
    TRACE,
    configure_logging,
    get_logger,
    resolve_level,
)
from config.logging.filters import ServiceNameFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "TRACE",
    # Filters
    "ServiceNameFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "resolve_level",
]
