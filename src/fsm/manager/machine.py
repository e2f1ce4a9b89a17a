"""
Máquina de estados (Machine) e sua factory de definição (define).

Este módulo implementa o loop de execução (spin): aplica o Outcome
selecionado pela entrada, executa sua ação e encadeia a próxima
entrada devolvida pela ação até receber a sentinela NO_INPUT.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from fsm.diagnostics.names import NameTables
from fsm.diagnostics.sink import TRACE, DiagnosticSink, quiet_logger
from fsm.errors.exceptions import ImpossibleStateError, InvalidInputError
from fsm.rules.validation import StateTable, build_state_table
from fsm.transitions.resolution import resolve_outcome
from fsm.types.definition import NO_INPUT, Input, State
from fsm.types.result import SpinResult

logger = logging.getLogger(__name__)


class Machine:
    """
    Máquina de estados finitos thread-safe.

    A tabela de estados é imutável após a definição; o estado corrente
    é o único dado mutável e só é alterado dentro de spin(), sob o lock
    da própria instância.

    Ações são executadas com o lock adquirido: uma ação que chame spin()
    na mesma Machine causa deadlock. Cadeias cíclicas que nunca devolvem
    NO_INPUT não terminam. Ambos são responsabilidade do caller.

    Attributes:
        current_state: Índice do estado corrente
    """

    __slots__ = ("_current_state", "_lock", "_names", "_sink", "_states")

    def __init__(
        self,
        states: StateTable,
        initial_state: int,
        sink: DiagnosticSink | None = None,
        names: NameTables | None = None,
    ) -> None:
        """
        Inicializa a máquina a partir de uma tabela já validada.

        Prefira define(), que valida a lista de estados.

        Args:
            states: Tabela índice → State
            initial_state: Índice do estado inicial
            sink: Sink de diagnóstico (logger silencioso se None)
            names: Tabelas de nomes para diagnóstico
        """
        self._states = states
        self._current_state = initial_state
        self._lock = threading.Lock()
        self._sink: DiagnosticSink = sink if sink is not None else quiet_logger()
        self._names = names or NameTables()

    @property
    def current_state(self) -> int:
        """Índice do estado corrente."""
        return self._current_state

    def state_name(self, index: int) -> str:
        """Nome de diagnóstico do estado, ou string vazia."""
        return self._names.state_name(index)

    def input_name(self, input_: Input) -> str:
        """Nome de diagnóstico da entrada, ou string vazia."""
        return self._names.input_name(input_)

    def attach_diagnostics(
        self,
        sink: DiagnosticSink | None = None,
        state_names: Mapping[int, str] | None = None,
        input_names: Mapping[Input, str] | None = None,
    ) -> None:
        """
        Substitui a configuração de diagnóstico.

        As tabelas de nomes são sempre substituídas; o sink só é trocado
        quando informado. Não é protegido contra chamadas concorrentes
        com spin().

        Args:
            sink: Novo sink (mantém o atual se None)
            state_names: Índice do estado → nome
            input_names: Entrada → nome
        """
        if sink is not None:
            self._sink = sink
        self._names = NameTables.from_optional(state_names, input_names)

    def spin(self, context: Any, input_: Input) -> SpinResult:
        """
        Avança a máquina em resposta a um evento externo.

        Processa a entrada e todas as entradas encadeadas pelas ações
        até a sentinela NO_INPUT. A cadeia inteira é atômica em relação
        a outros callers de spin(). Transições já aplicadas não são
        desfeitas em caso de erro.

        Args:
            context: Contexto de execução opaco repassado às ações
            input_: Entrada que dispara a cadeia

        Returns:
            SpinResult com o último contexto, o erro (se houver) e
            a quantidade de transições aplicadas
        """
        with self._lock:
            self._trace("FSM: get spin input [%d][%s]", input_, self.input_name(input_))

            steps = 0
            current_input = input_
            while current_input != NO_INPUT:
                self._trace(
                    "FSM: process input [%d][%s]",
                    current_input,
                    self.input_name(current_input),
                )

                try:
                    outcome = resolve_outcome(self._states, self._current_state, current_input)
                except (ImpossibleStateError, InvalidInputError) as exc:
                    self._trace_failure(exc)
                    return SpinResult(context=context, error=exc, steps=steps)

                context, current_input = outcome.action(context)
                self._current_state = outcome.state
                steps += 1

                self._trace(
                    "FSM: set current state [%d][%s] with next input [%d][%s]",
                    self._current_state,
                    self.state_name(self._current_state),
                    current_input,
                    self.input_name(current_input),
                )

            return SpinResult(context=context, steps=steps)

    def _trace(self, msg: str, *args: object) -> None:
        # Falha do sink não altera o resultado do spin
        try:
            self._sink.log(TRACE, msg, *args)
        except Exception:
            logger.warning("FSM: diagnostic sink failed", exc_info=True)

    def _trace_failure(self, exc: ImpossibleStateError | InvalidInputError) -> None:
        if isinstance(exc, InvalidInputError):
            self._trace(
                "FSM: invalid input [%d][%s] in current state [%d][%s]",
                exc.input,
                self.input_name(exc.input),
                exc.state_index,
                self.state_name(exc.state_index),
            )
            return
        self._trace("FSM: invalid state [%d]", exc.state_index)


def define(
    *states: State | Iterable[State],
    sink: DiagnosticSink | None = None,
    state_names: Mapping[int, str] | None = None,
    input_names: Mapping[Input, str] | None = None,
) -> Machine:
    """
    Define uma FSM a partir de uma lista de estados.

    Aceita os estados como argumentos posicionais ou uma única lista
    (define(s1, s2) ou define([s1, s2])). O primeiro estado é o inicial.

    Args:
        *states: Estados da máquina (ao menos um)
        sink: Sink de diagnóstico (logger silencioso se None)
        state_names: Índice do estado → nome, para diagnóstico
        input_names: Entrada → nome, para diagnóstico

    Returns:
        Machine configurada

    Raises:
        ValueError: Se nenhum estado for informado
        TypeError: Se algum elemento não for um State
        ClashingStateError: Se dois estados compartilham o mesmo índice
    """
    candidates: tuple = states
    if len(states) == 1 and not isinstance(states[0], State):
        candidates = tuple(states[0])  # type: ignore[arg-type]

    if not candidates:
        raise ValueError("define() requer ao menos um State")

    table = build_state_table(candidates)
    return Machine(
        states=table,
        initial_state=candidates[0].index,
        sink=sink,
        names=NameTables.from_optional(state_names, input_names),
    )
