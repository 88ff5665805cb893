"""Console command handler.

Hard contract: every input line produces exactly one reply line. On unparseable input or an
internal error, reply with a short message and log internally.
"""

from __future__ import annotations

import asyncio
import logging
from time import monotonic

from src.app import App
from src.counter.executor import CounterCommandError, execute_call
from src.intent.disambiguate import ReconcilePolicy
from src.intent.parser import resolve_intent_with_source

logger = logging.getLogger(__name__)

EMPTY_REPLY = "Please enter a command"
UNPARSED_REPLY = "Could not parse command"
ERROR_REPLY = "Internal error"


async def handle_command(text: str, app: App) -> str:
    """Resolve one command, apply it to the app counter and return the reply line."""

    started = monotonic()

    if not (text or "").strip():
        return EMPTY_REPLY

    # noinspection PyBroadException
    try:
        # The pipeline may block on the LLM HTTP call.
        result = await asyncio.to_thread(
            resolve_intent_with_source,
            text,
            llm_enabled=app.settings.llm_enabled,
            llm_api_key=app.settings.llm_api_key,
            policy=ReconcilePolicy(zero_set_is_reset=app.settings.zero_set_is_reset),
        )
        if result is None:
            latency_ms = int((monotonic() - started) * 1000)
            logger.info("unparsed latency_ms=%d", latency_ms)
            return UNPARSED_REPLY

        reply = execute_call(result.call, app.counter)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "handled source=%s operation=%s value=%d latency_ms=%d",
            result.source,
            result.call.name,
            app.counter.value,
            latency_ms,
        )
        return reply
    except CounterCommandError as exc:
        # Unknown operation / invalid value -> user-facing message, no stack trace.
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("rejected reason=%s latency_ms=%d", exc, latency_ms)
        return str(exc)
    except Exception:
        # Handler boundary: any internal error must still produce a reply line.
        logger.exception("handler failed")
        return ERROR_REPLY
