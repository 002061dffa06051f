"""Parsing entry points.

This module is the main integration point: it builds parsers from configuration
and turns pre-segmented record blocks into LogEntry objects.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import tzinfo

from .config import ParserConfig, resolve_parser_config, resolve_timezone
from .formats import LaravelLogParser, LogParser
from .models import LogEntry

LOGGER = logging.getLogger(__name__)

MAX_WORKERS_ENV = "LOG_PARSER_MAX_WORKERS"


def default_parser(cfg: ParserConfig | None = None) -> LogParser:
    """Parser built from config (env overrides applied once, here)."""
    cfg = resolve_parser_config(cfg)
    return LaravelLogParser(timezone=resolve_timezone(cfg.timezone))


def parse(
    text: str,
    file_identifier: str = "",
    file_position: int = 0,
    index: int = 0,
    default_timezone: str | tzinfo | None = None,
) -> LogEntry:
    """Parse a single record; timestamps without an offset are shown in ``default_timezone``."""
    parser = LaravelLogParser(timezone=resolve_timezone(default_timezone))
    return parser.parse(text, file_identifier, file_position, index)


def _resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv(MAX_WORKERS_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
        return value

    cpu_count = os.cpu_count() or 1
    return min(32, cpu_count)


def parse_entries(
    blocks: Iterable[tuple[int, str]],
    *,
    file_identifier: str = "",
    parser: LogParser | None = None,
    max_workers: int | None = None,
    parallel: bool = False,
) -> list[LogEntry]:
    """Parse ``(file_position, text)`` blocks in order.

    ``index`` is the position of the block in ``blocks``. With ``parallel`` the
    blocks are parsed on a thread pool; the result keeps input order either way.
    """
    if parser is None:
        parser = default_parser()

    work = list(blocks)

    def _parse_one(item: tuple[int, tuple[int, str]]) -> LogEntry:
        index, (position, text) = item
        return parser.parse(text, file_identifier, position, index)

    if not parallel or len(work) < 2:
        return [_parse_one(item) for item in enumerate(work)]

    workers = _resolve_max_workers(max_workers)
    LOGGER.debug("Parsing %d entries of %s with %d workers", len(work), file_identifier, workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_parse_one, enumerate(work)))
