"""Intent resolution pipeline (LLM optional; rules source fallback)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Literal

from src.intent.call_parser import parse_call
from src.intent.dictionaries import canonicalize_name
from src.intent.disambiguate import DEFAULT_POLICY, ReconcilePolicy, reconcile
from src.intent.normalize import normalize_text
from src.intent.rules_source import generate_via_rules
from src.intent.schema import COUNTER_OPERATIONS, FunctionCall
from src.intent.upstream import UpstreamError, UpstreamSource, generate_via_llm, llm_config_from_env

logger = logging.getLogger(__name__)

SourceName = Literal["llm", "rules"]


@dataclass(frozen=True)
class ResolveResult:
    """Resolved call plus information about which source produced it."""

    call: FunctionCall
    source: SourceName
    normalized: str


def _resolve_normalized(
        normalized: str,
        source: UpstreamSource,
        policy: ReconcilePolicy,
) -> FunctionCall | None:
    raw_output = source(normalized, COUNTER_OPERATIONS)
    logger.debug("upstream normalized=%r raw=%r", normalized, raw_output)

    parsed = parse_call(raw_output)
    if parsed is None:
        return None

    call = FunctionCall(name=canonicalize_name(parsed.raw_name), args=parsed.raw_args)
    return reconcile(call, normalized, policy=policy)


def resolve_intent(
        text: str,
        source: UpstreamSource,
        *,
        policy: ReconcilePolicy = DEFAULT_POLICY,
) -> FunctionCall | None:
    """Resolve a raw command into a function call.

    Strategy:
        1) Normalize the text to canonical English.
        2) Ask the upstream source for call text.
        3) Parse it, canonicalize the name, reconcile against keyword evidence.

    Returns:
        The call, or `None` for empty input or when the source answered without a call.
    """

    normalized = normalize_text(text)
    if not normalized:
        return None
    return _resolve_normalized(normalized, source, policy)


def resolve_intent_with_source(
        text: str,
        *,
        llm_enabled: bool,
        llm_api_key: str | None = None,
        policy: ReconcilePolicy = DEFAULT_POLICY,
) -> ResolveResult | None:
    """Resolve text, preferring the LLM source when enabled.

    Any LLM failure (`UpstreamError`, or a stray `ValueError`/`OSError` from the transport), or an
    LLM answer without a call, falls back to the rules source.
    """

    normalized = normalize_text(text)
    if not normalized:
        return None

    if llm_enabled:
        try:
            cfg = llm_config_from_env(api_key=llm_api_key)
            call = _resolve_normalized(normalized, partial(generate_via_llm, config=cfg), policy)
            if call is not None:
                return ResolveResult(call=call, source="llm", normalized=normalized)
        except (UpstreamError, ValueError, OSError) as exc:
            # The LLM is optional; its failures must never break command handling.
            logger.warning("llm upstream failed reason=%s", exc)

    call = _resolve_normalized(normalized, generate_via_rules, policy)
    if call is None:
        return None
    return ResolveResult(call=call, source="rules", normalized=normalized)
