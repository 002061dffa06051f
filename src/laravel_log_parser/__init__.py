"""Structured parsing of Laravel log records."""

from __future__ import annotations

from laravel_log_parser.core.config import ParserConfig
from laravel_log_parser.core.formats import LaravelLogParser
from laravel_log_parser.core.log_service import default_parser, parse, parse_entries
from laravel_log_parser.core.models import LogEntry, LogLevel

__all__ = [
    "LaravelLogParser",
    "LogEntry",
    "LogLevel",
    "ParserConfig",
    "default_parser",
    "parse",
    "parse_entries",
]
