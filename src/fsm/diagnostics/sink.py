"""
Sink de diagnóstico da FSM.

A engine só precisa de algo que aceite chamadas de log por nível com
argumentos formatados de forma preguiçosa; logging.Logger satisfaz o
protocolo. Cada Machine possui o próprio sink.
"""

from __future__ import annotations

import logging
from typing import Protocol

# Nível abaixo de DEBUG usado pelas linhas de rastreamento do Spin
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

QUIET_LOGGER_NAME = "fsm.quiet"


class DiagnosticSink(Protocol):
    """Protocolo mínimo de um sink de diagnóstico."""

    def log(self, level: int, msg: str, *args: object) -> None:
        """Registra uma mensagem no nível informado.

        Exceções levantadas aqui não interrompem o Spin: a Machine as
        registra como warning e segue a cadeia.
        """
        ...


def quiet_logger() -> logging.Logger:
    """
    Cria um logger silencioso, exclusivo de uma Machine.

    O logger não é registrado no logging.Manager: reconfigurar o logging
    do processo não o afeta, e nenhuma outra Machine o compartilha.

    Returns:
        Logger que descarta todas as mensagens
    """
    logger = logging.Logger(QUIET_LOGGER_NAME, level=logging.CRITICAL + 1)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
