"""Counter state and function-call dispatch.

The intent pipeline never validates arguments; this module is where an unknown operation or a
non-numeric `set_counter` value is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.intent.schema import FunctionCall, OperationName


class CounterCommandError(ValueError):
    """Raised when a resolved call cannot be executed."""


@dataclass
class Counter:
    """An integer counter starting at 0."""

    value: int = 0

    def increment(self) -> None:
        self.value += 1

    def decrement(self) -> None:
        self.value -= 1

    def set(self, value: int) -> None:
        self.value = value

    def reset(self) -> None:
        self.value = 0


def _parse_number(raw: str | None) -> int:
    try:
        return int((raw or "").strip())
    except ValueError as exc:
        raise CounterCommandError("Invalid value provided") from exc


def execute_call(call: FunctionCall, counter: Counter) -> str:
    """Apply a call to the counter and describe the outcome.

    Raises:
        CounterCommandError: If the operation is unknown or its value is not an integer.
    """

    operation = call.operation
    if operation == OperationName.increment:
        counter.increment()
        return f"Incremented counter to {counter.value}"
    if operation == OperationName.decrement:
        counter.decrement()
        return f"Decremented counter to {counter.value}"
    if operation == OperationName.set_counter:
        value = _parse_number(call.number)
        counter.set(value)
        return f"Set counter to {value}"
    if operation == OperationName.reset_counter:
        counter.reset()
        return "Counter reset to 0"

    raise CounterCommandError(f"Unknown function: {call.name}")
