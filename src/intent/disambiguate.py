"""Keyword-evidence correction of a parsed function call.

The upstream source is unreliable on a narrow, rule-amenable subset of inputs (for example it
tends to answer `reset_counter` for anything containing a 0). `reconcile` re-checks the parsed
call against keyword evidence in the *normalized* text, so one set of English checks covers all
three input languages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.intent.dictionaries import DECREMENT_KEYWORDS, INCREMENT_KEYWORDS, RESET_KEYWORDS
from src.intent.schema import FunctionCall, OperationName


def _keyword_re(keywords: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(rf"\b(?:{'|'.join(re.escape(k) for k in keywords)})\b", flags=re.ASCII)


_DECREMENT_RE = _keyword_re(DECREMENT_KEYWORDS)
_INCREMENT_RE = _keyword_re(INCREMENT_KEYWORDS)
_RESET_RE = _keyword_re(RESET_KEYWORDS)
_SET_PATTERN_RE = re.compile(r"\b(?:set|change)\b.*\b\d+\b|\bto\s+\d+\b", flags=re.ASCII)
_ZERO_RE = re.compile(r"\bto\s+0\b|\b0\b", flags=re.ASCII)
_NUMBER_RE = re.compile(r"\bto\s+(\d+)\b|\b(\d+)\b", flags=re.ASCII)

_SIGNED_ONE_TO_OPERATION: dict[str, OperationName] = {
    "+1": OperationName.increment,
    "-1": OperationName.decrement,
}


@dataclass(frozen=True)
class ReconcilePolicy:
    """Tunable parts of the correction pass.

    `zero_set_is_reset`: treat a parsed `set_counter` with `number == "0"` as `reset_counter`.
    Off by default so "set to 0" stays an explicit set.
    """

    zero_set_is_reset: bool = False


DEFAULT_POLICY = ReconcilePolicy()


@dataclass(frozen=True)
class KeywordEvidence:
    """Which operation families the normalized wording mentions."""

    decrement: bool
    increment: bool
    reset: bool
    set_pattern: bool

    @property
    def single_family(self) -> OperationName | None:
        """The only mentioned family among decrement/increment/reset, if exactly one is."""

        families = [
            op
            for op, present in (
                (OperationName.decrement, self.decrement),
                (OperationName.increment, self.increment),
                (OperationName.reset_counter, self.reset),
            )
            if present
        ]
        if len(families) == 1:
            return families[0]
        return None


def detect_evidence(normalized: str) -> KeywordEvidence:
    """Compute keyword evidence from normalized text (case-insensitive)."""

    text = (normalized or "").lower()
    return KeywordEvidence(
        decrement=_DECREMENT_RE.search(text) is not None,
        increment=_INCREMENT_RE.search(text) is not None,
        reset=_RESET_RE.search(text) is not None,
        set_pattern=_SET_PATTERN_RE.search(text) is not None,
    )


def is_zero_reset(normalized: str, evidence: KeywordEvidence) -> bool:
    """Whether the wording pairs reset evidence with an explicit zero."""

    return evidence.reset and _ZERO_RE.search((normalized or "").lower()) is not None


def extract_number(normalized: str) -> str | None:
    """Extract the set target: `to N` first, else the first bare digit run."""

    match = _NUMBER_RE.search((normalized or "").lower())
    if not match:
        return None
    return match.group(1) or match.group(2)


def _without_number(call: FunctionCall, name: OperationName) -> FunctionCall:
    args = {k: v for k, v in call.args.items() if k != "number"}
    return FunctionCall(name=str(name), args=args)


# Parsed names a single keyword family is allowed to override.
_OVERRIDABLE: dict[OperationName, frozenset[str]] = {
    OperationName.decrement: frozenset({OperationName.set_counter, OperationName.reset_counter}),
    OperationName.increment: frozenset({OperationName.set_counter, OperationName.reset_counter}),
    OperationName.reset_counter: frozenset(
        {OperationName.set_counter, OperationName.increment, OperationName.decrement}
    ),
}


def reconcile(
        call: FunctionCall,
        normalized: str,
        *,
        policy: ReconcilePolicy = DEFAULT_POLICY,
) -> FunctionCall:
    """Correct a parsed call against keyword evidence in the normalized input.

    Branches are tried in order and the first one that applies wins:
        1) `set_counter` with a literal `+1`/`-1` (or `0` under `zero_set_is_reset`) becomes
           the relative step (or a reset).
        2) Reset evidence plus an explicit zero forces `reset_counter`.
        3) An explicit "set/change ... N" or "to N" overrides a parsed `reset_counter`.
        4) Exactly one of decrement/increment/reset evidence, with no set pattern, overrides a
           parsed name from another family. Mixed evidence trusts the upstream source.

    Never raises; returns a new call or the input unchanged.
    """

    if call.name == OperationName.set_counter and call.number is not None:
        number = call.number.strip()
        if number in _SIGNED_ONE_TO_OPERATION:
            return _without_number(call, _SIGNED_ONE_TO_OPERATION[number])
        if policy.zero_set_is_reset and number == "0":
            return _without_number(call, OperationName.reset_counter)

    evidence = detect_evidence(normalized)
    zero_reset = is_zero_reset(normalized, evidence)

    if zero_reset:
        return _without_number(call, OperationName.reset_counter)

    if evidence.set_pattern and call.name == OperationName.reset_counter:
        args = dict(call.args)
        number = extract_number(normalized)
        if number is not None:
            args["number"] = number
        return FunctionCall(name=str(OperationName.set_counter), args=args)

    family = evidence.single_family
    if family is not None and not evidence.set_pattern and call.name in _OVERRIDABLE[family]:
        return _without_number(call, family)

    return call
