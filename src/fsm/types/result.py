"""Resultado de uma chamada a Machine.spin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fsm.errors.exceptions import ExecutionError


@dataclass(frozen=True, slots=True)
class SpinResult:
    """
    Resultado de um Spin.

    Erros de execução são devolvidos como valor, nunca levantados pelo
    loop. O contexto reflete todas as ações executadas antes de uma
    eventual falha.

    Attributes:
        context: Último contexto produzido pelas ações da cadeia
        error: ImpossibleStateError/InvalidInputError, ou None em sucesso
        steps: Quantidade de transições aplicadas nesta chamada
    """

    context: Any
    error: ExecutionError | None = None
    steps: int = 0

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.steps < 0:
            raise ValueError(f"steps não pode ser negativo, recebido: {self.steps}")

    @property
    def ok(self) -> bool:
        """True se a cadeia terminou na sentinela sem erro."""
        return self.error is None

    def raise_for_error(self) -> Any:
        """Levanta o erro carregado, se houver; caso contrário devolve o contexto."""
        if self.error is not None:
            raise self.error
        return self.context
