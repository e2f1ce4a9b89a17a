"""
Exports públicos do módulo fsm/rules.

Validação da definição e construção da tabela de estados.
"""

from fsm.rules.validation import (
    StateTable,
    build_state_table,
)

__all__ = [
    "StateTable",
    "build_state_table",
]
