"""Redaction of user data in error arguments.

The process-wide mode is read and written only through
:func:`get_redact_mode` / :func:`set_redact_mode`; every helper also accepts
an explicit ``mode`` that takes precedence over it.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

MARK_OPEN = "‹"
MARK_CLOSE = "›"
PLACEHOLDER = "?"


class RedactMode(str, Enum):
    DISABLED = "OFF"
    ENABLED = "ON"
    MARKER = "MARKER"


_lock = threading.Lock()
_mode = RedactMode.DISABLED


def get_redact_mode() -> RedactMode:
    with _lock:
        return _mode


def set_redact_mode(mode: RedactMode | str) -> RedactMode:
    """Switch the process-wide mode and return the previous one."""
    global _mode
    new_mode = RedactMode(mode)
    with _lock:
        previous, _mode = _mode, new_mode
    return previous


def _resolve(mode: RedactMode | str | None) -> RedactMode:
    return get_redact_mode() if mode is None else RedactMode(mode)


def mark(text: str) -> str:
    """Wrap *text* in marker delimiters, doubling the ones it contains."""
    escaped = text.replace(MARK_OPEN, MARK_OPEN * 2).replace(
        MARK_CLOSE, MARK_CLOSE * 2
    )
    return f"{MARK_OPEN}{escaped}{MARK_CLOSE}"


class RedactedArg:
    """Argument rendered between marker delimiters."""

    __slots__ = ("arg",)

    def __init__(self, arg: Any) -> None:
        self.arg = arg

    def __format__(self, spec: str) -> str:
        return mark(format(self.arg, spec))

    def __str__(self) -> str:
        return mark(str(self.arg))

    def __repr__(self) -> str:
        return mark(repr(self.arg))


def redact_error_args(
    args: Sequence[Any],
    positions: Iterable[int],
    mode: RedactMode | str | None = None,
) -> list[Any]:
    """Return a copy of *args* with the values at *positions* redacted.

    Positions past the end of *args* are ignored.
    """
    redacted = list(args)
    current = _resolve(mode)
    if current is RedactMode.DISABLED:
        return redacted
    for pos in positions:
        if 0 <= pos < len(redacted):
            if current is RedactMode.ENABLED:
                redacted[pos] = PLACEHOLDER
            else:
                redacted[pos] = RedactedArg(redacted[pos])
    return redacted


def need_redact(mode: RedactMode | str | None = None) -> bool:
    return _resolve(mode) is not RedactMode.DISABLED


def redact_key(key: bytes, mode: RedactMode | str | None = None) -> str:
    """Return *key* as uppercase hex, or the placeholder when redacting."""
    if need_redact(mode):
        return PLACEHOLDER
    return key.hex().upper()


def redact_key_bytes(key: bytes, mode: RedactMode | str | None = None) -> bytes:
    if need_redact(mode):
        return PLACEHOLDER.encode()
    return key.hex().upper().encode()
