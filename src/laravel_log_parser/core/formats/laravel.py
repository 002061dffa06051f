"""Laravel log entry parser.

Parses one pre-segmented record of the form::

    [2022-08-25 11:16:17.125000+02:00] optional text local.ERROR: message
    more lines {"json": "context"}
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from typing import Any

from ..models import LogEntry, LogLevel
from .json_payload import extract_json_payload
from .levels import parse_level

LOGGER = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(
    r"^\[(?P<ts>[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<micro>[0-9]{6}))?"
    r"(?P<offset>[+-][0-9]{2}:[0-9]{2})?\]"
)

# Lazy free text keeps the first "<env>.<LEVEL>:" on the header line.
_MARKER_RE = re.compile(r"(?P<free>[^\n]*?)(?P<env>\w+)\.(?P<level>\w*):(?: |(?=\r?\n)|\Z)")


@dataclass(frozen=True, slots=True)
class LogHeader:
    """Fields pulled from the first line of a record."""

    timestamp: datetime
    body: str
    environment: str | None = None
    level_token: str | None = None
    free_text: str = ""


def parse_timestamp(match: re.Match[str], *, default_tz: tzinfo = UTC) -> datetime:
    """Build an aware datetime from a matched timestamp bracket.

    An explicit offset is kept as-is. Without one, the wall clock is UTC and the
    result is shown in ``default_tz``. Raises ValueError for impossible dates.
    """
    raw = match.group(0)
    try:
        ts = datetime.strptime(match.group("ts"), "%Y-%m-%d %H:%M:%S")
    except ValueError as exc:
        raise ValueError(f"Invalid log timestamp {raw}") from exc

    micro = match.group("micro")
    if micro:
        ts = ts.replace(microsecond=int(micro))

    offset = match.group("offset")
    if not offset:
        return ts.replace(tzinfo=UTC).astimezone(default_tz)

    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if minutes >= 60:
        raise ValueError(f"Invalid UTC offset in log timestamp {raw}")
    try:
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    except ValueError as exc:
        raise ValueError(f"Invalid UTC offset in log timestamp {raw}") from exc
    return ts.replace(tzinfo=tz)


def split_header(text: str, *, default_tz: tzinfo = UTC) -> LogHeader | None:
    """Split a record into header fields and body; None if there is no timestamp."""
    m = _TIMESTAMP_RE.match(text)
    if not m:
        return None

    timestamp = parse_timestamp(m, default_tz=default_tz)
    rest = text[m.end() :]

    marker = _MARKER_RE.match(rest)
    if marker is None:
        LOGGER.debug("No environment/level marker after timestamp %s", m.group(0))
        body = rest[1:] if rest.startswith(" ") else rest
        return LogHeader(timestamp=timestamp, body=body if body.strip() else "")

    body = rest[marker.end() :]
    return LogHeader(
        timestamp=timestamp,
        body=body if body.strip() else "",
        environment=marker.group("env"),
        level_token=marker.group("level"),
        free_text=marker.group("free").strip(),
    )


def first_line(text: str) -> str:
    return text.split("\n", 1)[0].strip()


@dataclass(frozen=True, slots=True)
class LaravelLogParser:
    """Parse Laravel-style log records into LogEntry objects."""

    timezone: tzinfo = UTC

    def parse(
        self,
        text: str,
        file_identifier: str = "",
        file_position: int = 0,
        index: int = 0,
    ) -> LogEntry:
        """Parse one raw record. Always returns an entry unless the timestamp is impossible."""
        header = split_header(text, default_tz=self.timezone)
        if header is None:
            LOGGER.debug("No log header in entry %d of %s", index, file_identifier or "<unknown>")
            return LogEntry(
                index=index,
                file_identifier=file_identifier,
                file_position=file_position,
                level=LogLevel.NONE,
                datetime=None,
                message=first_line(text),
                original_text=text,
            )

        context: dict[str, Any] = {}
        if header.environment is not None:
            context["environment"] = header.environment

        body = header.body
        payload = extract_json_payload(body)
        if payload is not None:
            context["laravel_context"] = payload.value
            body = payload.text

        if header.free_text:
            body = f"{header.free_text} {body}" if body else header.free_text

        return LogEntry(
            index=index,
            file_identifier=file_identifier,
            file_position=file_position,
            level=parse_level(header.level_token),
            datetime=header.timestamp,
            message=first_line(body),
            original_text=body,
            context=context,
        )
