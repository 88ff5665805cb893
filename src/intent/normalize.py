"""Text normalization: multilingual counter commands -> canonical English."""

from __future__ import annotations

import re
import unicodedata

from src.intent.rules import REWRITE_RULES

_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Rewrite a raw command into canonical English keywords.

    Steps:
        - NFKC width folding (full-width `＋１` -> `+1`, `？` -> `?`).
        - Every rewrite rule, in table order, each over the output of the previous one.
        - Collapse whitespace and trim.

    Total over any string; unknown text passes through untouched.
    """

    value = unicodedata.normalize("NFKC", text or "")

    # NFKC keeps the math minus sign; the shorthand rules only know ASCII `-`.
    value = value.replace("−", "-")

    for rule in REWRITE_RULES:
        value = rule.apply(value)

    return _MULTISPACE_RE.sub(" ", value).strip()
