import pytest

from teamslogging.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in (
        "TEAMS_WEBHOOK_URL",
        "TEAMS_LEVEL",
        "TEAMS_STYLE",
        "TEAMS_NAME",
        "TEAMS_SHOW_AVATARS",
        "TEAMS_SHOW_TYPE",
        "TEAMS_BUBBLE",
        "TEAMS_TIMEZONE",
    ):
        monkeypatch.delenv(key, raising=False)
    # .env 파일이 테스트에 섞이지 않도록
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()


@pytest.fixture
def card_settings() -> Settings:
    return Settings(webhook_url="https://example.com/hook", style="card", name="svc")


@pytest.fixture
def simple_settings() -> Settings:
    return Settings(webhook_url="https://example.com/hook", style="simple", name="svc")
