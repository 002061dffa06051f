"""Log record formats.

Contains the Laravel record parser and the helpers it is built from.
"""

from __future__ import annotations

from .base import LogParser
from .json_payload import JsonCandidate, JsonPayload, extract_json_payload, find_json_candidate
from .laravel import LaravelLogParser, LogHeader, parse_timestamp, split_header
from .levels import KNOWN_LEVELS, parse_level

__all__ = [
    "KNOWN_LEVELS",
    "JsonCandidate",
    "JsonPayload",
    "LaravelLogParser",
    "LogHeader",
    "LogParser",
    "extract_json_payload",
    "find_json_candidate",
    "parse_level",
    "parse_timestamp",
    "split_header",
]
