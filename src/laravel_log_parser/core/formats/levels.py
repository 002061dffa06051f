"""Severity token normalization."""

from __future__ import annotations

from ..models import LogLevel

# Tokens the framework logger writes after the channel name.
KNOWN_LEVELS: frozenset[str] = frozenset(
    level.name for level in LogLevel if level is not LogLevel.NONE
)


def parse_level(value: str | None) -> LogLevel:
    """Map a severity token (any case) to a LogLevel; unknown tokens give NONE."""
    if value is None:
        return LogLevel.NONE
    name = value.strip().upper()
    if name not in KNOWN_LEVELS:
        return LogLevel.NONE
    return LogLevel[name]
