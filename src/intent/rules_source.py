"""Deterministic upstream source (keyword baseline).

Used when LLM mode is off, and as the fallback when the LLM fails. It answers in the same
`call:name{...}` text convention as a model would, so its output goes through the same parser and
correction pass.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.intent.call_parser import format_call
from src.intent.disambiguate import detect_evidence, extract_number
from src.intent.schema import OperationName, OperationSpec


def _guess(prompt: str) -> tuple[OperationName, dict[str, str]] | None:
    evidence = detect_evidence(prompt)

    if evidence.set_pattern:
        number = extract_number(prompt)
        if number is not None:
            return OperationName.set_counter, {"number": number}
    if evidence.reset:
        return OperationName.reset_counter, {}
    if evidence.decrement and not evidence.increment:
        return OperationName.decrement, {}
    if evidence.increment:
        return OperationName.increment, {}
    return None


def generate_via_rules(prompt: str, operations: Sequence[OperationSpec]) -> str:
    """Answer a normalized prompt with a call text, or `""` when nothing is recognized."""

    guess = _guess(prompt)
    if guess is None:
        return ""

    name, args = guess
    if name not in {op.name for op in operations}:
        return ""
    return format_call(str(name), args)
