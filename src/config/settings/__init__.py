"""Agregador de settings.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.engine import (
    EngineSettings,
    get_engine_settings,
)

__all__ = [
    "EngineSettings",
    "get_engine_settings",
]
