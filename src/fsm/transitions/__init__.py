"""
Exports públicos do módulo fsm/transitions.

Resolução de outcomes usada pelo loop do Spin.
"""

from fsm.transitions.resolution import resolve_outcome

__all__ = [
    "resolve_outcome",
]
