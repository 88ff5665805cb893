"""Tests for the deterministic keyword source."""

from __future__ import annotations

from src.intent.rules_source import generate_via_rules
from src.intent.schema import COUNTER_OPERATIONS, OperationName


def test_rules_source_answers_in_call_text() -> None:
    assert generate_via_rules("counter increment", COUNTER_OPERATIONS) == "call:increment{}"
    assert generate_via_rules("value decrement", COUNTER_OPERATIONS) == "call:decrement{}"
    assert generate_via_rules("reset", COUNTER_OPERATIONS) == "call:reset_counter{}"
    assert (
        generate_via_rules("set to 42", COUNTER_OPERATIONS)
        == "call:set_counter{number:<escape>42<escape>}"
    )


def test_rules_source_is_silent_without_evidence() -> None:
    assert generate_via_rules("hello there", COUNTER_OPERATIONS) == ""


def test_rules_source_respects_available_operations() -> None:
    operations = tuple(op for op in COUNTER_OPERATIONS if op.name != OperationName.set_counter)
    assert generate_via_rules("set to 42", operations) == ""
