"""Cobertura de concorrência para Machine.spin."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from fsm import NO_INPUT, InvalidInputError, Outcome, State, define

INPUT_GO, INPUT_BACK, INPUT_UNKNOWN = 0, 1, 2
STATE_IDLE, STATE_BUSY = 0, 1


class _ChainCounter:
    """Conta ações e detecta execução sobreposta de cadeias."""

    def __init__(self) -> None:
        self.actions = 0
        self.in_flight = False
        self.overlaps = 0

    def go(self, context: object) -> tuple[object, int]:
        if self.in_flight:
            self.overlaps += 1
        self.in_flight = True
        self.actions += 1
        return context, INPUT_BACK

    def back(self, context: object) -> tuple[object, int]:
        self.actions += 1
        self.in_flight = False
        return context, NO_INPUT


def _machine(counter: _ChainCounter):
    return define(
        State(STATE_IDLE, {INPUT_GO: Outcome(STATE_BUSY, counter.go)}),
        State(STATE_BUSY, {INPUT_BACK: Outcome(STATE_IDLE, counter.back)}),
    )


def test_concurrent_spins_run_whole_chains_atomically() -> None:
    counter = _ChainCounter()
    machine = _machine(counter)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: machine.spin(None, INPUT_GO), range(400)))

    assert all(result.ok for result in results)
    assert sum(result.steps for result in results) == 2 * 400
    assert counter.actions == 2 * 400
    assert counter.overlaps == 0
    # Cada cadeia volta para IDLE antes de liberar o lock
    assert machine.current_state == STATE_IDLE


def test_concurrent_valid_and_invalid_inputs_keep_counts_consistent() -> None:
    counter = _ChainCounter()
    machine = _machine(counter)
    inputs = [INPUT_GO if i % 2 == 0 else INPUT_UNKNOWN for i in range(300)]

    with ThreadPoolExecutor(max_workers=6) as pool:
        results = list(pool.map(lambda input_: machine.spin(None, input_), inputs))

    failures = [r for r in results if not r.ok]
    assert len(failures) == 150
    assert all(isinstance(r.error, InvalidInputError) for r in failures)
    assert all(r.error.state_index == STATE_IDLE for r in failures)
    assert sum(r.steps for r in results) == counter.actions == 2 * 150
    assert machine.current_state == STATE_IDLE


def test_readers_never_observe_unknown_cursor() -> None:
    counter = _ChainCounter()
    machine = _machine(counter)
    stop = threading.Event()
    observed: set[int] = set()

    def _reader() -> None:
        while True:
            observed.add(machine.current_state)
            if stop.is_set():
                return

    reader = threading.Thread(target=_reader)
    reader.start()
    try:
        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(lambda _: machine.spin(None, INPUT_GO), range(200)))
    finally:
        stop.set()
        reader.join()

    assert observed <= {STATE_IDLE, STATE_BUSY}
    assert STATE_IDLE in observed
