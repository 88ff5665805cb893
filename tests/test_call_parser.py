"""Tests for extracting `call:name{args}` from upstream output."""

from __future__ import annotations

import pytest

from src.intent.call_parser import ParsedCall, format_call, parse_call


def test_parse_call_without_args() -> None:
    assert parse_call("call:increment{}") == ParsedCall(raw_name="increment", raw_args={})


def test_parse_call_with_escaped_arg() -> None:
    parsed = parse_call("call:set_counter{number:<escape>42<escape>}")
    assert parsed == ParsedCall(raw_name="set_counter", raw_args={"number": "42"})


def test_parse_call_inside_model_markup() -> None:
    parsed = parse_call("<start_function_call>call:RESET_COUNTER{}<end_function_call>")
    assert parsed is not None
    assert parsed.raw_name == "RESET_COUNTER"


def test_escaped_values_may_contain_commas() -> None:
    parsed = parse_call("call:set_counter{number:<escape>1,000<escape>}")
    assert parsed is not None
    assert parsed.raw_args == {"number": "1,000"}


def test_plain_args_are_a_fallback() -> None:
    parsed = parse_call("call:set_counter{number:42,note:x}")
    assert parsed is not None
    assert parsed.raw_args == {"number": "42", "note": "x"}


def test_escaped_pass_wins_over_plain_pass() -> None:
    parsed = parse_call("call:set_counter{number:<escape>7<escape>,note:x}")
    assert parsed is not None
    assert parsed.raw_args == {"number": "7"}


def test_first_call_wins() -> None:
    parsed = parse_call("call:decrement{} call:increment{}")
    assert parsed is not None
    assert parsed.raw_name == "decrement"


@pytest.mark.parametrize(
    "output",
    ["no function call here", "", "call:increment{", "call:{}", "call increment{}"],
)
def test_no_call_returns_none(output: str) -> None:
    assert parse_call(output) is None


def test_format_call_is_read_back() -> None:
    text = format_call("set_counter", {"number": "5"})
    assert text == "call:set_counter{number:<escape>5<escape>}"
    assert parse_call(text) == ParsedCall(raw_name="set_counter", raw_args={"number": "5"})


def test_format_call_keeps_commas_in_values() -> None:
    text = format_call("set_counter", {"number": "1,000"})
    assert parse_call(text) == ParsedCall(raw_name="set_counter", raw_args={"number": "1,000"})


@pytest.mark.parametrize(
    ("name", "args"),
    [
        ("set_counter", {"number": "1}"}),
        ("set_counter", {"number": "<b>5"}),
        ("set counter", {}),
        ("", {}),
        ("set_counter", {"the number": "5"}),
    ],
)
def test_format_call_rejects_values_that_cannot_be_read_back(name: str, args: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        format_call(name, args)
