"""Exceções da FSM."""

from .exceptions import (
    ClashingStateError,
    DefinitionError,
    ExecutionError,
    FSMError,
    ImpossibleStateError,
    InvalidInputError,
)

__all__ = [
    "ClashingStateError",
    "DefinitionError",
    "ExecutionError",
    "FSMError",
    "ImpossibleStateError",
    "InvalidInputError",
]
