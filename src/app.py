"""Application composition root.

This module wires together configuration and the counter the console session mutates.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.config.settings import Settings
from src.counter.executor import Counter


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    counter: Counter = field(default_factory=Counter)


def create_app(settings: Settings) -> App:
    """Create the application container with a fresh counter at 0."""

    return App(settings=settings, counter=Counter())
