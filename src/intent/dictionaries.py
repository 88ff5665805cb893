"""Operation-name and keyword dictionaries.

`FUNCTION_NAME_MAP` canonicalizes whatever name the upstream source emitted; the keyword families
feed the evidence checks in `src.intent.disambiguate`. Both are static and read-only.
"""

from __future__ import annotations

from src.intent.schema import OperationName

OPERATION_SYNONYMS: dict[OperationName, tuple[str, ...]] = {
    OperationName.increment: ("increment", "add", "plus", "increase"),
    OperationName.decrement: ("decrement", "decrease", "subtract", "minus"),
    # The upstream model has been seen answering `print_counter` for set requests.
    OperationName.set_counter: ("set_counter", "set", "print_counter"),
    OperationName.reset_counter: ("reset_counter", "reset", "clear_counter", "clear"),
}


def _case_variants(term: str) -> set[str]:
    return {term, term.lower(), term.upper(), term.capitalize(), term.title()}


FUNCTION_NAME_MAP: dict[str, OperationName] = {
    variant: op
    for op, terms in OPERATION_SYNONYMS.items()
    for term in terms
    for variant in _case_variants(term)
}

DECREMENT_KEYWORDS: tuple[str, ...] = ("decrement", "subtract", "minus", "decrease")
INCREMENT_KEYWORDS: tuple[str, ...] = ("increment", "add", "plus", "increase")
RESET_KEYWORDS: tuple[str, ...] = ("reset", "clear", "zero")


def canonicalize_name(raw_name: str) -> str:
    """Map a raw operation name to its canonical form.

    Unknown names are lower-cased and returned as-is; the executor rejects them later.
    """

    op = FUNCTION_NAME_MAP.get(raw_name)
    if op is not None:
        return str(op)
    return (raw_name or "").lower()
