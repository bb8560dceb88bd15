from pathlib import Path

import pytest
from pydantic import ValidationError

from errchain.config import Settings, configure
from errchain.redact import RedactMode, get_redact_mode


def test_settings_defaults(clean_env: None) -> None:
    settings = Settings()
    assert settings.redact_log is RedactMode.DISABLED
    assert settings.log_level == "INFO"


def test_settings_reads_env_file(clean_env: None, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "ERRCHAIN_REDACT_LOG=marker",
                "ERRCHAIN_LOG_LEVEL=debug",
                "UNRELATED=1",
            ]
        )
    )
    settings = Settings()
    assert settings.redact_log is RedactMode.MARKER
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("ON", RedactMode.ENABLED),
        ("on", RedactMode.ENABLED),
        ("OFF", RedactMode.DISABLED),
        ("Marker", RedactMode.MARKER),
        ("", RedactMode.DISABLED),
    ],
)
def test_settings_redact_log_variants(
    clean_env: None, monkeypatch: pytest.MonkeyPatch, value: str, expected: RedactMode
) -> None:
    monkeypatch.setenv("ERRCHAIN_REDACT_LOG", value)
    assert Settings().redact_log is expected


def test_settings_rejects_unknown_mode(
    clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ERRCHAIN_REDACT_LOG", "sometimes")
    with pytest.raises(ValidationError):
        Settings()


def test_configure_applies_redaction(
    clean_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ERRCHAIN_REDACT_LOG", "ON")
    settings = configure()
    assert settings.redact_log is RedactMode.ENABLED
    assert get_redact_mode() is RedactMode.ENABLED

    configure(Settings(ERRCHAIN_REDACT_LOG="MARKER"))
    assert get_redact_mode() is RedactMode.MARKER
