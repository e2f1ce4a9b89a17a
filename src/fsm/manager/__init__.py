"""
Exports públicos do módulo fsm/manager.

Máquina de estados (Machine) e factory de definição (define).
"""

from fsm.manager.machine import (
    Machine,
    define,
)

__all__ = [
    "Machine",
    "define",
]
