"""Extract a function call from the upstream source's free-text output.

The structural pattern is `call:<name>{<args>}`. Argument values use the model's escaped-string
convention `key:<escape>value<escape>`; plain `key:value` pairs are accepted as a fallback.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

ESCAPE_MARKER = "<escape>"

_CALL_RE = re.compile(r"call:(\w+)\{([^}]*)\}", flags=re.ASCII)
_ESCAPED_ARG_RE = re.compile(rf"(\w+):{ESCAPE_MARKER}([^<]*){ESCAPE_MARKER}", flags=re.ASCII)
_PLAIN_ARG_RE = re.compile(r"(\w+):([^,}]+)", flags=re.ASCII)
_WORD_RE = re.compile(r"\w+", flags=re.ASCII)
_UNENCODABLE_VALUE_RE = re.compile(r"[<}]")


@dataclass(frozen=True)
class ParsedCall:
    """Raw operation name and arguments, before canonicalization."""

    raw_name: str
    raw_args: dict[str, str] = field(default_factory=dict)


def _parse_args(body: str) -> dict[str, str]:
    # Escaped values may contain commas, so never merge with the plain pass.
    args = {m.group(1): m.group(2) for m in _ESCAPED_ARG_RE.finditer(body)}
    if args:
        return args
    return {m.group(1): m.group(2) for m in _PLAIN_ARG_RE.finditer(body)}


def parse_call(output: str) -> ParsedCall | None:
    """Parse the first `call:name{...}` occurrence.

    Returns:
        The parsed call, or `None` when the output holds no recognizable call.
    """

    match = _CALL_RE.search(output or "")
    if not match:
        return None
    return ParsedCall(raw_name=match.group(1), raw_args=_parse_args(match.group(2)))


def format_call(name: str, args: Mapping[str, str] | None = None) -> str:
    """Render a call in the same structural pattern `parse_call` reads.

    Raises:
        ValueError: If the name or a key is not a word, or a value contains `<` or `}`. The
            pattern has no escape for those, so the call would not read back unchanged.
    """

    if not _WORD_RE.fullmatch(name):
        raise ValueError(f"unencodable function name: {name!r}")
    for key, value in (args or {}).items():
        if not _WORD_RE.fullmatch(key):
            raise ValueError(f"unencodable argument name: {key!r}")
        if _UNENCODABLE_VALUE_RE.search(value):
            raise ValueError(f"unencodable value for {key}: {value!r}")

    body = ",".join(f"{key}:{ESCAPE_MARKER}{value}{ESCAPE_MARKER}" for key, value in (args or {}).items())
    return f"call:{name}{{{body}}}"
