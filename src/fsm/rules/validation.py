"""
Validação da definição de uma FSM.

Constrói a tabela de estados a partir da lista fornecida pelo caller,
antes que qualquer Machine exista. Nenhuma instância é mutada em caso
de falha.
"""

from __future__ import annotations

from collections.abc import Iterable

from fsm.errors.exceptions import ClashingStateError
from fsm.types.definition import State

# Tabela completa de transições: índice do estado → State
StateTable = dict[int, State]


def build_state_table(states: Iterable[State]) -> StateTable:
    """
    Constrói a tabela de estados indexada por State.index.

    Args:
        states: Estados na ordem da definição

    Returns:
        Tabela índice → State

    Raises:
        TypeError: Se algum elemento não for um State
        ClashingStateError: Se dois estados compartilham o mesmo índice
    """
    table: StateTable = {}
    for state in states:
        if not isinstance(state, State):
            raise TypeError(
                f"Elemento da definição não é um State: {type(state).__name__}"
            )
        if state.index in table:
            raise ClashingStateError(state.index)
        table[state.index] = state
    return table
