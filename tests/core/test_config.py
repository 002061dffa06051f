from __future__ import annotations

from datetime import UTC
from zoneinfo import ZoneInfo

import pytest

from laravel_log_parser.core.config import ParserConfig, resolve_parser_config, resolve_timezone


def test_resolve_timezone_defaults_to_utc() -> None:
    assert resolve_timezone(None) is UTC
    assert resolve_timezone("UTC") is UTC
    assert resolve_timezone("") is UTC


def test_resolve_timezone_iana_name() -> None:
    assert resolve_timezone("Europe/Vilnius") == ZoneInfo("Europe/Vilnius")


def test_resolve_timezone_unknown_name() -> None:
    with pytest.raises(ValueError):
        resolve_timezone("Mars/Olympus_Mons")


def test_env_fills_missing_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PARSER_TIMEZONE", "Europe/Vilnius")

    assert resolve_parser_config().timezone == "Europe/Vilnius"
    assert resolve_parser_config(ParserConfig(timezone="Asia/Tokyo")).timezone == "Asia/Tokyo"


def test_env_with_bad_timezone_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PARSER_TIMEZONE", "Not/AZone")

    with pytest.raises(ValueError):
        resolve_parser_config()


def test_empty_env_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PARSER_TIMEZONE", "  ")

    assert resolve_parser_config() == ParserConfig()
