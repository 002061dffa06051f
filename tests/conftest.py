from __future__ import annotations

import pytest


@pytest.fixture
def multiline_body() -> str:
    return "\n".join(
        [
            "Example log entry for the level debug",
            "with multiple lines of content.",
            "can contain dumped objects or JSON as well - it's all part of the contents.",
        ]
    )


@pytest.fixture
def log_blocks() -> list[str]:
    return [
        "[2022-08-25 11:16:17] local.INFO: service started",
        "[2022-08-25 11:16:18] local.WARNING: retrying request {\"id\":\"abc123\"}",
        "[2022-08-25 11:16:19] local.ERROR: upstream timeout\n[stacktrace]\n#0 {main}",
        "[2022-08-25 11:16:20] local.CRITICAL: database unavailable",
    ]


@pytest.fixture(autouse=True)
def _clear_parser_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_PARSER_TIMEZONE", raising=False)
    monkeypatch.delenv("LOG_PARSER_MAX_WORKERS", raising=False)
