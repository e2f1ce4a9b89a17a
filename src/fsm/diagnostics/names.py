"""Tabelas de nomes usadas apenas para renderizar diagnósticos."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from fsm.types.definition import Input


@dataclass(frozen=True, slots=True)
class NameTables:
    """
    Nomes de exibição de estados e entradas.

    Attributes:
        states: Índice do estado → nome
        inputs: Entrada → nome
    """

    states: Mapping[int, str] = field(default_factory=dict)
    inputs: Mapping[Input, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))

    @classmethod
    def from_optional(
        cls,
        states: Mapping[int, str] | None = None,
        inputs: Mapping[Input, str] | None = None,
    ) -> NameTables:
        """Cria tabelas tratando None como tabela vazia."""
        return cls(states=states or {}, inputs=inputs or {})

    def state_name(self, index: int) -> str:
        """Nome do estado, ou string vazia se desconhecido."""
        return self.states.get(index, "")

    def input_name(self, input_: Input) -> str:
        """Nome da entrada, ou string vazia se desconhecida."""
        return self.inputs.get(input_, "")
