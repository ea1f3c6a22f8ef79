import pytest
from pydantic import ValidationError

from teamslogging.records import Severity
from teamslogging.settings import Settings, get_settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.webhook_url == ""
    assert settings.level is Severity.DEBUG
    assert settings.style == "simple"
    assert settings.name == "Default"
    assert settings.show_avatars is True
    assert settings.show_type is True
    assert settings.bubble is True
    assert settings.connect_timeout == 3.0
    assert settings.timeout == 10.0


def test_settings_override_via_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAMS_WEBHOOK_URL", "https://example.com/hook")
    monkeypatch.setenv("TEAMS_LEVEL", "warning")
    monkeypatch.setenv("TEAMS_STYLE", "Card")
    monkeypatch.setenv("TEAMS_SHOW_AVATARS", "false")

    settings = Settings()

    assert settings.webhook_url == "https://example.com/hook"
    assert settings.level is Severity.WARNING
    assert settings.style == "card"
    assert settings.show_avatars is False


def test_numeric_level_maps_to_severity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEAMS_LEVEL", "40")
    assert Settings().level is Severity.ERROR


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(style="fancy")
    with pytest.raises(ValidationError):
        Settings(level="loud")


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.name = "other"  # type: ignore[misc]


def test_env_file_is_read(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("TEAMS_NAME=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert Settings().name == "from-dotenv"


def test_get_settings_cached() -> None:
    first = get_settings()
    second = get_settings()
    assert first is second


def test_with_overrides_validates_changes() -> None:
    settings = Settings(name="svc")

    updated = settings.with_overrides(style=" CARD ", level="error")

    assert updated.style == "card"
    assert updated.level is Severity.ERROR
    assert updated.name == "svc"
    assert settings.style == "simple"
    with pytest.raises(ValidationError):
        settings.with_overrides(style="fancy")
