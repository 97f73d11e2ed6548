"""Command-line entry point: configure logging, check credentials, serve."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import TYPE_CHECKING

from gemini_mcp.config import Config
from gemini_mcp.constants import SamplingControl
from gemini_mcp.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

LOG_LEVEL_ENV_VAR = "GEMINI_MCP_LOG_LEVEL"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger("gemini_mcp.cli")


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the MCP protocol.

    ``basicConfig`` is a no-op once the root logger has handlers, so calling
    this more than once keeps the first configuration.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemini-mcp",
        description="MCP server exposing Gemini with Google Search and URL context",
    )
    parser.add_argument("--model", help="Gemini model (default: $GEMINI_MODEL)")
    parser.add_argument(
        "--sampling-control",
        choices=[c.value for c in SamplingControl],
        help="Secondary sampling control accepted by ask_gemini",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        default=None,
        help="Echo prompts instead of calling Gemini",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper(),
        choices=_LOG_LEVELS,
        help="Logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry: returns a process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = Config.from_env(
            model=args.model,
            sampling_control=args.sampling_control,
            use_mock=args.mock,
        )
    except ConfigurationError as exc:
        logger.error("Error: %s", exc)
        if exc.hint:
            logger.error("Hint: %s", exc.hint)
        return 1

    logger.debug("Starting with %s", config)
    from gemini_mcp.server import serve

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Gemini MCP server stopped")
    return 0
