"""Parser interface."""

from __future__ import annotations

from typing import Protocol

from ..models import LogEntry


class LogParser(Protocol):
    """Parser interface: turn one pre-segmented record into a LogEntry."""

    def parse(
        self,
        text: str,
        file_identifier: str = "",
        file_position: int = 0,
        index: int = 0,
    ) -> LogEntry:
        """Parse a raw record into a LogEntry."""
        ...
