"""
Exports públicos do módulo fsm/types.

Modelo de definição (State, Outcome, Input, Action) e resultado do Spin.
"""

from fsm.types.definition import (
    NO_ACTION,
    NO_INPUT,
    Action,
    Input,
    Outcome,
    State,
)
from fsm.types.result import SpinResult

__all__ = [
    "NO_ACTION",
    "NO_INPUT",
    "Action",
    "Input",
    "Outcome",
    "SpinResult",
    "State",
]
