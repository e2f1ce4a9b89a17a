"""
Exports públicos do módulo fsm/diagnostics.

Sink de diagnóstico e tabelas de nomes para renderização de logs.
"""

from fsm.diagnostics.names import NameTables
from fsm.diagnostics.sink import (
    QUIET_LOGGER_NAME,
    TRACE,
    DiagnosticSink,
    quiet_logger,
)

__all__ = [
    "QUIET_LOGGER_NAME",
    "TRACE",
    "DiagnosticSink",
    "NameTables",
    "quiet_logger",
]
