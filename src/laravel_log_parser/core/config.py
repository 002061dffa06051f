"""Parser configuration.

The only setting is the timezone used to present timestamps that carry no
explicit UTC offset.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TIMEZONE_ENV = "LOG_PARSER_TIMEZONE"


@dataclass(frozen=True, slots=True)
class ParserConfig:
    timezone: str | None = None  # IANA name; None means UTC


def resolve_parser_config(cfg: ParserConfig | None = None) -> ParserConfig:
    """Return config with the env timezone filled in when none was given."""
    if cfg is None:
        cfg = ParserConfig()
    if cfg.timezone is not None:
        return cfg

    env = os.getenv(TIMEZONE_ENV)
    if env is None or env.strip() == "":
        return cfg

    value = env.strip()
    # Fail early on a bad name instead of on the first parsed entry.
    resolve_timezone(value)
    return replace(cfg, timezone=value)


def resolve_timezone(name: str | tzinfo | None) -> tzinfo:
    """Resolve a timezone name into a tzinfo (UTC when missing)."""
    if name is None:
        return UTC
    if isinstance(name, tzinfo):
        return name

    key = name.strip()
    if not key or key.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone '{name}'. Use an IANA name such as 'Europe/Vilnius'.") from exc
