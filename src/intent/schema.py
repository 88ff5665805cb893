"""Counter operation schema (Pydantic models).

This schema is the contract between the intent pipeline and the counter collaborator. The
upstream source receives `COUNTER_OPERATIONS` as the set of callable operations; the pipeline
returns a `FunctionCall` whose name may or may not be one of them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class OperationName(StrEnum):
    """Canonical counter operations."""

    increment = "increment"
    decrement = "decrement"
    set_counter = "set_counter"
    reset_counter = "reset_counter"


class ArgumentSpec(BaseModel):
    """A single named argument of an operation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["string"] = "string"
    description: str


class OperationSpec(BaseModel):
    """An operation the upstream source is allowed to call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: OperationName
    description: str
    arguments: dict[str, ArgumentSpec] = Field(default_factory=dict)
    required: tuple[str, ...] = ()

    def to_tool_schema(self) -> dict[str, Any]:
        """Render as an OpenAI-style function tool definition."""

        return {
            "type": "function",
            "function": {
                "name": str(self.name),
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        key: {"type": arg.type, "description": arg.description}
                        for key, arg in self.arguments.items()
                    },
                    "required": list(self.required),
                },
            },
        }


COUNTER_OPERATIONS: tuple[OperationSpec, ...] = (
    OperationSpec(name=OperationName.increment, description="Add 1 to the counter"),
    OperationSpec(name=OperationName.decrement, description="Subtract 1 from the counter"),
    OperationSpec(
        name=OperationName.set_counter,
        description="Set the counter to a specific number",
        arguments={"number": ArgumentSpec(description="The number to set")},
        required=("number",),
    ),
    OperationSpec(name=OperationName.reset_counter, description="Reset the counter to 0"),
)


class FunctionCall(BaseModel):
    """A resolved function call.

    `name` is canonicalized but not guaranteed to be a known operation; callers dispatch on
    `operation` and reject `None`. Argument values stay strings (numeric validation is the
    executor's job).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    args: dict[str, str] = Field(default_factory=dict)

    @property
    def operation(self) -> OperationName | None:
        try:
            return OperationName(self.name)
        except ValueError:
            return None

    @property
    def number(self) -> str | None:
        return self.args.get("number")
