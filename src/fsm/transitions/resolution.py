"""
Resolução de um passo do loop de execução.

Dado o estado corrente e uma entrada, localiza o Outcome a aplicar.
Entradas ou estados ausentes da tabela viram erros de execução.
"""

from __future__ import annotations

from collections.abc import Mapping

from fsm.errors.exceptions import ImpossibleStateError, InvalidInputError
from fsm.types.definition import Input, Outcome, State


def resolve_outcome(
    table: Mapping[int, State],
    current: int,
    input_: Input,
) -> Outcome:
    """
    Retorna o Outcome que a entrada provoca no estado corrente.

    Args:
        table: Tabela de estados da Machine
        current: Índice do estado corrente
        input_: Entrada a processar

    Returns:
        Outcome selecionado

    Raises:
        ImpossibleStateError: Se o estado corrente não está na tabela
        InvalidInputError: Se o estado corrente não aceita a entrada
    """
    state = table.get(current)
    if state is None:
        raise ImpossibleStateError(current)

    outcome = state.outcome_for(input_)
    if outcome is None:
        raise InvalidInputError(current, input_)

    return outcome
