"""로그 레코드 -> MessageCard 메시지 변환."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from teamslogging.message import CardMessage, Fact, Message, Section, SimpleMessage
from teamslogging.palette import avatar_for, colour_for
from teamslogging.records import ErrorInfo, LogRecord, Structured, classify
from teamslogging.settings import Settings


def build_message(
    level_name: str,
    message: str,
    context: Mapping[str, Any] | None,
    settings: Settings,
    now: datetime | None = None,
) -> Message:
    """심각도/메시지/컨텍스트로 Simple 또는 Card 메시지를 만든다.

    입력은 변경하지 않으며 예외를 던지지 않는다.
    """
    if settings.style == "card":
        return _card(level_name, message, context or {}, settings, now)
    return _simple(level_name, message, settings)


def build_from_record(record: LogRecord, settings: Settings, now: datetime | None = None) -> Message:
    return build_message(record.level_name, record.message, record.context, settings, now)


def colour_span(text: str, colour: str) -> str:
    return f'<span style="color:#{colour}">{text}</span>'


def format_timestamp(now: datetime | None, tz_name: str) -> str:
    """예: "Mon, Oct 19 2026 09:30:00 UTC"."""
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        tz, tz_name = timezone.utc, "UTC"

    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)
    else:
        now = now.astimezone(tz)
    return f"{now:%a, %b %d %Y %H:%M:%S} {tz_name}"


def _simple(level_name: str, message: str, settings: Settings) -> SimpleMessage:
    colour = colour_for(level_name)
    severity = colour_span(level_name, colour) if settings.show_type else level_name
    prefix = f"{settings.name} - " if settings.name else ""
    return SimpleMessage(text=f"{prefix}{severity}: {message}", theme_color=colour)


def _card(
    level_name: str,
    message: str,
    context: Mapping[str, Any],
    settings: Settings,
    now: datetime | None,
) -> CardMessage:
    colour = colour_for(level_name)

    facts: list[Fact] = []
    errors: list[tuple[str, ErrorInfo]] = []
    for key, raw in context.items():
        value = classify(raw)
        if isinstance(value, ErrorInfo):
            errors.append((key, value))
        elif isinstance(value, Structured):
            facts.append(Fact(name=key, value=f"`{value.text}`"))
        else:
            facts.append(Fact(name=key, value=value.text))

    facts.append(Fact(name="Timestamp", value=format_timestamp(now, settings.timezone)))

    primary = Section(
        activity_title=settings.name,
        activity_subtitle=colour_span(message, colour) if settings.show_type else message,
        activity_image=avatar_for(level_name, settings.avatar_base_url) if settings.show_avatars else None,
        facts=tuple(facts),
    )

    return CardMessage(
        summary=level_name + (f": {settings.name}" if settings.name else ""),
        theme_color=colour,
        sections=(primary, *(_exception_section(key, error) for key, error in errors)),
    )


def _exception_section(key: str, error: ErrorInfo) -> Section:
    # 마크다운에서 줄바꿈을 유지하려면 빈 줄이 필요하다
    return Section(
        activity_title=key,
        activity_subtitle=error.message,
        activity_text="\n\n".join(error.trace.split("\n")),
        facts=(
            Fact(name="Code", value=str(error.code)),
            Fact(name="File", value=error.file),
            Fact(name="Line", value=str(error.line)),
        ),
        start_group=True,
    )
