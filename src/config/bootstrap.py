"""Bootstrap de diagnóstico: composition root do logging.

Uso:
    from config.bootstrap import initialize_logging

    # Na inicialização do processo
    initialize_logging()

    # Machines passam a receber loggers configurados como sink
    machine = define(*states, sink=get_logger("pedidos.fsm"))
"""

from __future__ import annotations

import logging

from config.logging import configure_logging
from config.settings import EngineSettings, get_engine_settings

logger = logging.getLogger(__name__)


def initialize_logging(settings: EngineSettings | None = None) -> EngineSettings:
    """Valida settings e configura o logging do processo.

    Args:
        settings: Settings explícitas (usa get_engine_settings() se None).

    Returns:
        As settings efetivamente aplicadas.

    Raises:
        ValueError: Se as settings forem inválidas.
    """
    effective = settings if settings is not None else get_engine_settings()

    errors = effective.validate()
    if errors:
        raise ValueError("Settings inválidas: " + "; ".join(errors))

    configure_logging(
        level=effective.log_level,
        service_name=effective.service_name,
    )
    logger.debug(
        "Logging configured for %s at %s",
        effective.service_name,
        effective.log_level.upper(),
    )
    return effective
