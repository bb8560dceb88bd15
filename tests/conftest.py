import logging
from collections.abc import Iterator

import pytest
from loguru import logger

from errchain.redact import RedactMode, set_redact_mode


@pytest.fixture(autouse=True)
def reset_redact_mode() -> Iterator[None]:
    """Keep the process-wide redaction mode from leaking between tests."""
    previous = set_redact_mode(RedactMode.DISABLED)
    yield
    set_redact_mode(previous)


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterator[None]:
    """CLI runs replace loguru sinks with one bound to a temporary stderr."""
    yield
    logger.remove()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Drop errchain variables and run from a directory without .env."""
    monkeypatch.delenv("ERRCHAIN_REDACT_LOG", raising=False)
    monkeypatch.delenv("ERRCHAIN_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route loguru records into caplog."""
    caplog.set_level(logging.DEBUG)
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)
