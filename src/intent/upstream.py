"""Optional LLM upstream source (feature-flagged).

The LLM only produces **call text** (`call:name{...}`); it never mutates the counter. Its answer
is parsed and corrected exactly like the rules source's answer.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from src.intent.call_parser import format_call
from src.intent.schema import OperationSpec

_FUNCTIONS_PLACEHOLDER = "{functions}"


class UpstreamError(RuntimeError):
    """Raised when the LLM upstream fails to return a usable answer."""


class UpstreamSource(Protocol):
    """Turns a normalized prompt plus the callable operations into raw output text."""

    def __call__(self, prompt: str, operations: Sequence[OperationSpec]) -> str: ...


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for the OpenAI-style Chat Completions API call."""

    api_key: str
    model: str = "gpt-4o-mini"
    api_base: str = "https://api.openai.com/v1"
    timeout_s: float = 30.0


def render_operations(operations: Sequence[OperationSpec]) -> str:
    lines = []
    for op in operations:
        line = f"- {op.name}: {op.description}"
        if op.arguments:
            line += f" (parameter: {', '.join(op.arguments)})"
        lines.append(line)
    return "\n".join(lines)


def _load_prompt(operations: Sequence[OperationSpec]) -> str:
    prompt_path = Path(__file__).resolve().parent / "prompt_counter_v1.md"
    template = prompt_path.read_text(encoding="utf-8")
    # Not str.format: the template itself contains literal `{}` call examples.
    return template.replace(_FUNCTIONS_PLACEHOLDER, render_operations(operations))


def _chat_completions_url(api_base: str) -> str:
    return api_base.rstrip("/") + "/chat/completions"


def _message_to_text(message: Mapping[str, Any]) -> str:
    """Return the message content, or its first tool call rendered as call text."""

    tool_calls = message.get("tool_calls") or []
    if tool_calls:
        first = tool_calls[0] if isinstance(tool_calls, list) else None
        function = first.get("function") if isinstance(first, dict) else None
        if not isinstance(function, dict):
            raise UpstreamError("LLM returned malformed tool call")

        raw_arguments = function.get("arguments") or "{}"
        try:
            arguments = json.loads(raw_arguments)
        except (TypeError, json.JSONDecodeError) as exc:
            raise UpstreamError("LLM returned malformed tool arguments") from exc
        if not isinstance(arguments, dict):
            raise UpstreamError("LLM returned malformed tool arguments")

        try:
            return format_call(str(function.get("name") or ""), {k: str(v) for k, v in arguments.items()})
        except ValueError as exc:
            raise UpstreamError(f"LLM tool call cannot be encoded: {exc}") from exc

    return str(message.get("content") or "")


def generate_via_llm(prompt: str, operations: Sequence[OperationSpec], *, config: LLMConfig) -> str:
    """Call an LLM and return its raw answer text.

    The call is compatible with OpenAI-style `/v1/chat/completions` APIs.
    """

    payload = {
        "model": config.model,
        "temperature": 0,
        "messages": [
            {"role": "system", "content": _load_prompt(operations)},
            {"role": "user", "content": prompt},
        ],
        "tools": [op.to_tool_schema() for op in operations],
    }

    req = Request(
        _chat_completions_url(config.api_base),
        method="POST",
        headers={
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        },
        data=json.dumps(payload).encode(),
    )

    try:
        with urlopen(req, timeout=config.timeout_s) as resp:  # noqa: S310 (explicit, feature-flagged network call)
            body = resp.read()
    except HTTPError as exc:
        raise UpstreamError(f"LLM HTTP error: {exc.code}") from exc
    except TimeoutError as exc:
        raise UpstreamError("LLM request timed out") from exc
    except OSError as exc:  # URLError and socket-level failures
        raise UpstreamError("LLM connection error") from exc

    try:
        decoded = json.loads(body)
        message = decoded["choices"][0]["message"]
    except Exception as exc:  # noqa: BLE001
        raise UpstreamError("Unexpected LLM response format") from exc
    if not isinstance(message, dict):
        raise UpstreamError("Unexpected LLM response format")

    return _message_to_text(message)


def llm_config_from_env(*, api_key: str | None = None) -> LLMConfig:
    """Build LLM config from environment variables.

    Environment variables (optional):
        - LLM_MODEL
        - LLM_API_BASE
        - LLM_TIMEOUT_S

    Raises:
        UpstreamError: If the key is missing or the timeout is not a positive number, so a
            misconfigured LLM falls back to the rules source like any other LLM failure.
    """

    key = api_key or os.getenv("LLM_API_KEY") or ""
    if not key:
        raise UpstreamError("LLM_API_KEY is required")

    raw_timeout = os.getenv("LLM_TIMEOUT_S") or "30"
    try:
        timeout_s = float(raw_timeout)
    except ValueError as exc:
        raise UpstreamError(f"LLM_TIMEOUT_S must be a number, got {raw_timeout!r}") from exc
    if timeout_s <= 0:
        raise UpstreamError(f"LLM_TIMEOUT_S must be positive, got {raw_timeout!r}")

    return LLMConfig(
        api_key=key,
        model=os.getenv("LLM_MODEL") or "gpt-4o-mini",
        api_base=os.getenv("LLM_API_BASE") or "https://api.openai.com/v1",
        timeout_s=timeout_s,
    )
