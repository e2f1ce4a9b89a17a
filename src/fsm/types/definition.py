"""
Modelo de definição da FSM: entradas, ações, outcomes e estados.

Dados puros, sem comportamento além da validação de construção.
Uma FSM é definida por uma lista de State; cada State mapeia as
entradas que aceita para o Outcome (estado destino + ação) que
cada entrada provoca.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final, TypeAlias

# Identificador opaco de um evento. Definido pelo caller.
Input: TypeAlias = int

# Sentinela reservada: "nenhuma entrada, encerra o encadeamento"
NO_INPUT: Final[Input] = -1

# Uma ação recebe o contexto de execução e devolve o contexto
# (possivelmente modificado) e a próxima entrada (ou NO_INPUT).
Action: TypeAlias = Callable[[Any], tuple[Any, Input]]


def NO_ACTION(context: Any) -> tuple[Any, Input]:  # noqa: N802
    """Ação identidade: não altera o contexto e sempre encerra a cadeia.

    Útil quando uma entrada deve apenas mudar o estado da FSM.
    """
    return context, NO_INPUT


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Resultado de uma entrada aceita por um estado.

    Attributes:
        state: Índice do estado para o qual a FSM se move
        action: Ação executada quando este outcome é selecionado
    """

    state: int
    action: Action = NO_ACTION

    def __post_init__(self) -> None:
        """Valida que a ação é invocável."""
        if not callable(self.action):
            raise TypeError(
                f"action do Outcome para o estado {self.state} deve ser callable, "
                f"recebido: {type(self.action).__name__}"
            )


@dataclass(frozen=True, slots=True)
class State:
    """
    Um estado possível da FSM.

    Os outcomes são copiados para um mapeamento somente-leitura, de modo
    que a tabela de estados seja imutável depois da definição.

    Attributes:
        index: Identificador do estado, único dentro de uma Machine
        outcomes: Mapeamento entrada → Outcome (entradas ausentes são inválidas)
    """

    index: int
    outcomes: Mapping[Input, Outcome]

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))

    def outcome_for(self, input_: Input) -> Outcome | None:
        """Retorna o Outcome para a entrada, ou None se não for aceita."""
        return self.outcomes.get(input_)
