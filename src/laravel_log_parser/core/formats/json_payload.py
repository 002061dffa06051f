"""Embedded JSON payload scanning.

Log bodies often carry the serialized context array somewhere in the text.
Candidates are located with a delimiter-depth scanner; ``json`` is only used to
decode the located substring.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

LOGGER = logging.getLogger(__name__)

_OPENERS = {"{": "}", "[": "]"}
_CLOSERS = frozenset(_OPENERS.values())


@dataclass(frozen=True, slots=True)
class JsonCandidate:
    """Location of a balanced ``{...}`` / ``[...]`` substring."""

    start: int
    end: int  # exclusive
    balanced: bool = True  # False when a closer did not match its opener


@dataclass(frozen=True, slots=True)
class JsonPayload:
    """Decoded payload plus the text it was removed from."""

    value: Any
    text: str  # input with the payload substring removed
    start: int
    end: int


def _scan_from(text: str, start: int, dead: set[int]) -> JsonCandidate | None:
    """Match delimiters from ``text[start]``; None if the opener never closes.

    On failure the openers still open at the end are added to ``dead``: a scan
    started at any of them replays this one from that point and fails the same way.
    """
    stack: list[tuple[int, str]] = []
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in _OPENERS:
            stack.append((i, _OPENERS[ch]))
        elif ch in _CLOSERS:
            if ch != stack[-1][1]:
                return JsonCandidate(start=start, end=i + 1, balanced=False)
            stack.pop()
            if not stack:
                return JsonCandidate(start=start, end=i + 1)

    dead.update(pos for pos, _ in stack)
    return None


def find_json_candidate(text: str) -> JsonCandidate | None:
    """Return the first delimited candidate in ``text``.

    Openers that are never closed are skipped; the first opener that does close
    (or hits a mismatched closer) ends the search.
    """
    dead: set[int] = set()
    for i, ch in enumerate(text):
        if ch not in _OPENERS or i in dead:
            continue
        candidate = _scan_from(text, i, dead)
        if candidate is not None:
            return candidate
    return None


def extract_json_payload(text: str) -> JsonPayload | None:
    """Decode and cut out the first JSON candidate in ``text``.

    Returns None when there is no candidate or the first candidate is not valid
    JSON; later candidates are not tried.
    """
    candidate = find_json_candidate(text)
    if candidate is None:
        return None

    raw = text[candidate.start : candidate.end]
    if not candidate.balanced:
        LOGGER.debug("Mismatched delimiters in JSON candidate at offset %d", candidate.start)
        return None

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        LOGGER.debug("JSON candidate at offset %d did not decode", candidate.start)
        return None

    return JsonPayload(
        value=value,
        text=text[: candidate.start] + text[candidate.end :],
        start=candidate.start,
        end=candidate.end,
    )
