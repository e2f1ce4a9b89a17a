"""Taxonomia de erros da FSM.

Erros de definição são levantados por define(); erros de execução
são devolvidos dentro de SpinResult. Cada erro carrega os dados
estruturados necessários para montar um diagnóstico preciso.
"""

from __future__ import annotations


class FSMError(Exception):
    """Base para todos os erros da FSM."""


class DefinitionError(FSMError):
    """Base para falhas detectadas na definição da máquina."""


class ExecutionError(FSMError):
    """Base para falhas detectadas durante um Spin."""


class ClashingStateError(DefinitionError):
    """Dois estados da definição compartilham o mesmo índice."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Tentativa de definir FSM com estados conflitantes. Índice: {index}"
        )


class ImpossibleStateError(ExecutionError):
    """A FSM está num estado que não faz parte da sua definição.

    Indica definição incorreta ou alteração manual do estado corrente.
    """

    def __init__(self, state_index: int) -> None:
        self.state_index = state_index
        super().__init__(f"FSM em estado impossível: {state_index}")


class InvalidInputError(ExecutionError):
    """A entrada não é aceita pelo estado corrente."""

    def __init__(self, state_index: int, input_: int) -> None:
        self.state_index = state_index
        self.input = input_
        super().__init__(
            f"Entrada inválida no estado corrente. (Estado: {state_index}, Entrada: {input_})"
        )
