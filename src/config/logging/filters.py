"""Filters de logging para injeção de contexto.

Campos injetados:
- service: Nome do serviço que embarca a FSM
"""

from __future__ import annotations

import logging


class ServiceNameFilter(logging.Filter):
    """Injeta service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona service ao record.

        Se service já foi passado via `extra`, preserva o valor.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "service", None)
        record.service = existing if existing else self._service_name
        return True
