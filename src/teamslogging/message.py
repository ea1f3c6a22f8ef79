"""MessageCard 페이로드 모델."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Fact(_Payload):
    name: str
    value: str


class Section(_Payload):
    activity_title: str = Field(alias="activityTitle")
    activity_subtitle: str = Field(alias="activitySubtitle")
    activity_text: Optional[str] = Field(default=None, alias="activityText")
    activity_image: Optional[str] = Field(default=None, alias="activityImage")
    facts: tuple[Fact, ...] = ()
    start_group: Optional[bool] = Field(default=None, alias="startGroup")
    markdown: bool = True


class SimpleMessage(_Payload):
    """한 줄 메시지."""

    text: str
    theme_color: str = Field(alias="themeColor")


class CardMessage(_Payload):
    """요약 + 섹션 목록. 첫 섹션은 본문, 이후는 예외별 섹션."""

    summary: str
    theme_color: str = Field(alias="themeColor")
    sections: tuple[Section, ...] = ()


Message = Union[SimpleMessage, CardMessage]
