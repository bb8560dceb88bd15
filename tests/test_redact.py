import threading

import pytest

from errchain import errorf
from errchain.redact import (
    RedactedArg,
    RedactMode,
    get_redact_mode,
    mark,
    need_redact,
    redact_error_args,
    redact_key,
    redact_key_bytes,
    set_redact_mode,
)


def test_default_mode_is_disabled() -> None:
    assert get_redact_mode() is RedactMode.DISABLED
    assert not need_redact()


def test_set_redact_mode_returns_previous() -> None:
    assert set_redact_mode("ON") is RedactMode.DISABLED
    assert get_redact_mode() is RedactMode.ENABLED
    assert set_redact_mode(RedactMode.MARKER) is RedactMode.ENABLED


def test_set_redact_mode_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        set_redact_mode("SOMETIMES")


def test_disabled_leaves_args_untouched() -> None:
    args = ["secret", 42]
    got = redact_error_args(args, [0, 1])
    assert got == args
    assert got is not args


def test_enabled_replaces_with_placeholder() -> None:
    set_redact_mode(RedactMode.ENABLED)
    args = ["secret", "public"]
    got = redact_error_args(args, [0])
    assert got == ["?", "public"]
    assert args == ["secret", "public"]
    assert str(errorf("user %s from %s", *got)) == "user ? from public"


def test_marker_wraps_argument() -> None:
    set_redact_mode(RedactMode.MARKER)
    got = redact_error_args(["secret", "public"], [0])
    assert isinstance(got[0], RedactedArg)
    assert "%s and %s" % tuple(got) == "‹secret› and public"
    assert f"{got[0]:>8}" == "‹  secret›"
    assert repr(got[0]) == "‹'secret'›"


def test_marker_doubles_delimiters() -> None:
    got = redact_error_args(["a‹b›c"], [0], mode=RedactMode.MARKER)
    assert str(got[0]) == "‹a‹‹b››c›"
    assert mark("") == "‹›"


def test_positions_out_of_range_are_ignored() -> None:
    got = redact_error_args(["a"], [3, -1], mode="ON")
    assert got == ["a"]


def test_explicit_mode_overrides_global() -> None:
    set_redact_mode(RedactMode.ENABLED)
    assert redact_error_args(["a"], [0], mode=RedactMode.DISABLED) == ["a"]
    assert not need_redact(RedactMode.DISABLED)
    assert need_redact()


@pytest.mark.parametrize(
    "mode, want, want_bytes",
    [
        (RedactMode.DISABLED, "00FFAB", b"00FFAB"),
        (RedactMode.ENABLED, "?", b"?"),
        (RedactMode.MARKER, "?", b"?"),
    ],
)
def test_redact_key(mode: RedactMode, want: str, want_bytes: bytes) -> None:
    key = bytes([0x00, 0xFF, 0xAB])
    assert redact_key(key, mode) == want
    assert redact_key_bytes(key, mode) == want_bytes


def test_mode_switches_concurrently() -> None:
    modes = [RedactMode.ENABLED, RedactMode.MARKER, RedactMode.DISABLED]

    def flip(mode: RedactMode) -> None:
        for _ in range(200):
            set_redact_mode(mode)
            assert get_redact_mode() in modes

    threads = [threading.Thread(target=flip, args=(mode,)) for mode in modes]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert get_redact_mode() in modes
