"""Tests for multilingual -> canonical English normalization."""

from __future__ import annotations

import pytest

from src.intent.normalize import normalize_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("+1", "increment"),
        ("-1", "decrement"),
        ("＋１", "increment"),
        ("make it 100", "set to 100"),
        ("go down", "decrement"),
        ("clear it", "reset it"),
        ("increase then decrease", "increment then decrement"),
        ("하나 더해줘", "increment one"),
        ("카운터를 증가시켜줘", "counter increment"),
        ("숫자를 내려줘", "number decrement"),
        ("50으로 설정해줘", "to 50 set"),
        ("카운터 리셋해줘", "counter reset"),
        ("カウンターを増やして", "counter increment"),
        ("値を下げて", "value decrement"),
        ("5に設定してください", "set to 5"),
        ("カウンターを50にして", "counter set to 50"),
        ("リセットしてください", "reset"),
        ("全部消して", "reset"),
        ("もう一つ", "increment"),
        ("減らしてくれる?", "decrement"),
        ("増やしてくれる？", "increment"),
        ("上げろよ", "increment"),
    ],
)
def test_normalize_multilingual_commands(raw: str, expected: str) -> None:
    assert normalize_text(raw) == expected


def test_reset_to_zero_is_not_rewritten_by_set_to_zero() -> None:
    # "reset to zero" contains "set to zero" without a word boundary.
    assert normalize_text("reset to zero") == "reset to zero"


def test_plus_one_does_not_fire_inside_larger_numbers() -> None:
    assert normalize_text("+10") == "+10"


def test_zero_reset_keeps_explicit_zero() -> None:
    normalized = normalize_text("0にリセット")
    assert "reset" in normalized.split()
    assert "0" in normalized.split()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10にリセット", "set to 10"),
        ("10にリセットして", "set to 10"),
        ("10に戻して", "set to 10"),
        ("0に戻して", "reset"),
    ],
)
def test_zero_inside_larger_number_is_not_a_reset(raw: str, expected: str) -> None:
    assert normalize_text(raw) == expected


def test_set_counter_to_number_keeps_set_pattern() -> None:
    assert "to 50" in normalize_text("set counter to 50")


def test_korean_increment_contains_keyword() -> None:
    assert "increment" in normalize_text("카운터를 증가시켜줘")


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_input_normalizes_to_empty(raw: str) -> None:
    assert normalize_text(raw) == ""


@pytest.mark.parametrize(
    "raw",
    ["{{}}", "call:reset_counter{", "ñandú 🙂", "Привет", "(((", "1,000,000"],
)
def test_normalize_is_total(raw: str) -> None:
    assert isinstance(normalize_text(raw), str)


@pytest.mark.parametrize(
    "raw",
    [
        "+1",
        "make it 100",
        "reset to zero",
        "하나 더해줘",
        "카운터를 증가시켜줘",
        "50으로 설정해줘",
        "カウンターを50にして",
        "値を下げて",
        "0にリセット",
        "increase then decrease",
    ],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize_text(raw)
    assert normalize_text(once) == once
