"""MCP server entrypoint (stdio transport).

Exposes the log entry parser as MCP tools so clients can turn raw Laravel log
records into structured entries.

Run locally (stdio):
    python -m laravel_log_parser.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from laravel_log_parser.tools.parse import parse_log_impl, parse_logs_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("LOG_PARSER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("laravel-log-parser", json_response=True)


@mcp.tool()
def parse_log_entry(
    text: str,
    file_identifier: str = "",
    file_position: int = 0,
    index: int = 0,
    timezone: str | None = None,
) -> dict[str, Any]:
    """Parse one raw Laravel log record into a structured entry.

    Parameters
    ----------
    text:
        The complete record, including continuation lines.
    file_identifier/file_position/index:
        Caller-supplied source metadata, returned unchanged.
    timezone:
        IANA timezone used to show timestamps that carry no UTC offset.
        Defaults to LOG_PARSER_TIMEZONE, then UTC.

    Returns
    -------
    dict:
        {"index", "file_identifier", "file_position", "level", "level_class",
         "datetime", "message", "text", "context"}
    """
    return parse_log_impl(
        text=text,
        file_identifier=file_identifier,
        file_position=file_position,
        index=index,
        timezone=timezone,
    )


@mcp.tool()
def parse_log_entries(
    blocks: Sequence[str],
    file_identifier: str = "",
    timezone: str | None = None,
    levels: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Parse several pre-segmented records at once.

    Parameters
    ----------
    blocks:
        Raw records in file order. Entry indexes follow this order.
    levels:
        Only return entries with these severities (e.g., ["error", "critical"]). Case-insensitive.

    Returns
    -------
    dict:
        {"count": int, "entries": list[dict]}
    """
    return parse_logs_impl(
        blocks=blocks,
        file_identifier=file_identifier,
        timezone=timezone,
        levels=levels,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
