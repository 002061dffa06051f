"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from laravel_log_parser.core.config import ParserConfig
from laravel_log_parser.core.log_service import default_parser, parse_entries
from laravel_log_parser.core.models import LogLevel

HARD_LIMIT = 5000
ALL_LEVELS = [level.name for level in LogLevel]


def _parse_levels(levels: Sequence[str] | None) -> set[LogLevel] | None:
    """Parse user-supplied severity names into LogLevel enums."""
    if not levels:
        return None
    out: set[LogLevel] = set()
    for s in levels:
        name = s.strip().upper()
        if not name:
            continue
        try:
            out.add(LogLevel[name])
        except KeyError as e:
            valid = ", ".join(ALL_LEVELS)
            raise ValueError(
                f"Unknown log level '{s}'. Valid values: {valid}. "
                "Tip: levels is case-insensitive (e.g., 'error', 'WARNING')."
            ) from e
    return out or None


def parse_log_impl(
    *,
    text: str,
    file_identifier: str = "",
    file_position: int = 0,
    index: int = 0,
    timezone: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_log_entry` MCP tool."""
    if file_position < 0:
        raise ValueError("file_position must be >= 0")
    if index < 0:
        raise ValueError("index must be >= 0")

    parser = default_parser(ParserConfig(timezone=timezone))
    return parser.parse(text, file_identifier, file_position, index).to_dict()


def parse_logs_impl(
    *,
    blocks: Sequence[str],
    file_identifier: str = "",
    timezone: str | None = None,
    levels: Sequence[str] | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_log_entries` MCP tool.

    Notes
    -----
    Blocks are treated as if they were joined with newlines, so each entry's
    ``file_position`` is the character offset of its block in that text.
    """
    if len(blocks) > HARD_LIMIT:
        raise ValueError(f"At most {HARD_LIMIT} blocks can be parsed per call")

    allowed = _parse_levels(levels)

    positioned: list[tuple[int, str]] = []
    position = 0
    for block in blocks:
        positioned.append((position, block))
        position += len(block) + 1

    entries = parse_entries(
        positioned,
        file_identifier=file_identifier,
        parser=default_parser(ParserConfig(timezone=timezone)),
        parallel=True,
    )
    if allowed is not None:
        entries = [e for e in entries if e.level in allowed]

    return {"count": len(entries), "entries": [e.to_dict() for e in entries]}
