"""
Módulo FSM: engine de execução de máquinas de estados finitos.

O caller declara estados, as entradas que cada estado aceita e o
Outcome (estado destino + ação) que cada entrada provoca; depois
avança a máquina com Machine.spin, uma entrada por evento.

Estrutura:
    - types/: Modelo de definição (State, Outcome, Input, Action) e SpinResult
    - errors/: Taxonomia de erros (definição vs. execução)
    - rules/: Validação da definição (tabela de estados)
    - transitions/: Resolução de outcome por passo do loop
    - diagnostics/: Sink de diagnóstico e tabelas de nomes
    - manager/: Máquina de estados (Machine) e factory define()

Uso:
    machine = define(
        State(IDLE, {START: Outcome(RUNNING, on_start)}),
        State(RUNNING, {STOP: Outcome(IDLE)}),
    )
    result = machine.spin(context, START)
    if not result.ok:
        ...
"""

# Diagnóstico
from fsm.diagnostics import (
    TRACE,
    DiagnosticSink,
    NameTables,
    quiet_logger,
)

# Erros
from fsm.errors import (
    ClashingStateError,
    DefinitionError,
    ExecutionError,
    FSMError,
    ImpossibleStateError,
    InvalidInputError,
)

# Manager
from fsm.manager import (
    Machine,
    define,
)

# Validação
from fsm.rules import (
    StateTable,
    build_state_table,
)

# Transições
from fsm.transitions import resolve_outcome

# Types
from fsm.types import (
    NO_ACTION,
    NO_INPUT,
    Action,
    Input,
    Outcome,
    SpinResult,
    State,
)

__all__ = [
    "NO_ACTION",
    "NO_INPUT",
    "TRACE",
    # Types
    "Action",
    # Erros
    "ClashingStateError",
    "DefinitionError",
    # Diagnóstico
    "DiagnosticSink",
    "ExecutionError",
    "FSMError",
    "ImpossibleStateError",
    "Input",
    "InvalidInputError",
    # Manager
    "Machine",
    "NameTables",
    "Outcome",
    "SpinResult",
    "State",
    # Validação
    "StateTable",
    "build_state_table",
    "define",
    "quiet_logger",
    # Transições
    "resolve_outcome",
]
