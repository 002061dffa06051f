"""Core data models for parsed log entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Severity levels written by the framework logger."""

    EMERGENCY = "EMERGENCY"
    ALERT = "ALERT"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    PROCESSING = "PROCESSING"
    PROCESSED = "PROCESSED"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NONE = "NONE"

    @property
    def css_class(self) -> str:
        """Display group for the level (success/info/warning/danger/none)."""
        return _CSS_CLASSES.get(self, "none")


_CSS_CLASSES = {
    LogLevel.PROCESSED: "success",
    LogLevel.DEBUG: "info",
    LogLevel.INFO: "info",
    LogLevel.PROCESSING: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "danger",
    LogLevel.CRITICAL: "danger",
    LogLevel.ALERT: "danger",
    LogLevel.EMERGENCY: "danger",
}


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One parsed log record.

    ``index``, ``file_identifier`` and ``file_position`` are supplied by the caller
    that segmented the source; they are never inferred from the text.
    """

    index: int
    file_identifier: str
    file_position: int
    level: LogLevel
    datetime: datetime | None  # None when the leading timestamp is missing
    message: str
    original_text: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    def get_original_text(self) -> str:
        """Return the body with the header and extracted JSON removed."""
        return self.original_text

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry into a JSON-serializable dict."""
        return LogEntryModel.from_entry(self).model_dump()


class LogEntryModel(BaseModel):
    index: int = Field(ge=0, description="Ordinal position of the entry within its source.")
    file_identifier: str = Field(description="Opaque identifier of the source file.")
    file_position: int = Field(ge=0, description="Offset of the entry within its source.")
    level: str = Field(description="Lowercase severity name ('none' when unrecognized).")
    level_class: str = Field(description="Display group: success, info, warning, danger or none.")
    datetime: str | None = Field(default=None, description="ISO-8601 timestamp with offset.")
    message: str = Field(description="First line of the processed body.")
    text: str = Field(description="Processed body text.")
    context: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: LogEntry) -> LogEntryModel:
        return cls(
            index=entry.index,
            file_identifier=entry.file_identifier,
            file_position=entry.file_position,
            level=entry.level.name.lower(),
            level_class=entry.level.css_class,
            datetime=entry.datetime.isoformat() if entry.datetime is not None else None,
            message=entry.message,
            text=entry.original_text,
            context=dict(entry.context),
        )
