from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from teamslogging.palette import DEFAULT_AVATAR_BASE_URL
from teamslogging.records import Severity


class Settings(BaseSettings):
    """Teams 웹훅 로깅 설정 (환경변수 TEAMS_*)."""

    webhook_url: str = Field(default="", description="Incoming Webhook URL. 비어 있으면 전송하지 않는다.")
    level: Severity = Field(default=Severity.DEBUG, description="전송할 최소 심각도")
    style: Literal["simple", "card"] = "simple"
    name: str = Field(default="Default", description="메시지에 표시될 이름")
    show_avatars: bool = True
    show_type: bool = Field(default=True, description="심각도를 색상 span으로 감쌀지 여부")
    bubble: bool = True
    connect_timeout: float = 3.0
    timeout: float = 10.0
    timezone: str = Field(default="UTC", description="Timestamp fact에 쓰일 IANA 타임존")
    avatar_base_url: str = DEFAULT_AVATAR_BASE_URL

    model_config = SettingsConfigDict(
        env_prefix="TEAMS_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            if value.isdigit():
                return Severity.from_levelno(int(value))
            return Severity.parse(value)
        if isinstance(value, int) and not isinstance(value, Severity):
            return Severity.from_levelno(value)
        return value

    @field_validator("style", mode="before")
    @classmethod
    def _normalize_style(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def with_overrides(self, **changes: object) -> "Settings":
        """일부 값을 바꾼 새 설정. model_copy와 달리 검증을 다시 거친다."""
        return type(self).model_validate({**self.model_dump(), **changes})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """설정을 캐싱해 로드한다."""
    return Settings()
