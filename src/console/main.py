"""Console process entrypoint: one command per stdin line, one reply per stdout line."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.console.handlers import handle_command

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Control a counter with natural-language commands.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (default: INFO)")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    """Run the read-resolve-reply loop until stdin is exhausted."""

    args = _parse_args(argv)
    settings = load_settings()
    configure_logging(args.log_level)

    app = create_app(settings)
    logger.info("ready llm_enabled=%s zero_set_is_reset=%s", settings.llm_enabled, settings.zero_set_is_reset)

    try:
        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            reply = await handle_command(line.rstrip("\n"), app)
            print(reply, flush=True)
    finally:
        logger.info("shutting down value=%d", app.counter.value)


def run() -> None:
    """Console script entrypoint."""

    asyncio.run(main())


if __name__ == "__main__":
    run()
