import json
from datetime import datetime, timezone

from teamslogging.builder import build_message, format_timestamp
from teamslogging.message import CardMessage, SimpleMessage
from teamslogging.palette import DEFAULT_COLOUR, colour_for
from teamslogging.records import ErrorInfo
from teamslogging.settings import Settings

NOW = datetime(2026, 10, 19, 9, 30, 5, tzinfo=timezone.utc)


def _raise(message: str) -> Exception:
    try:
        raise RuntimeError(message)
    except RuntimeError as caught:
        return caught


def test_simple_message_with_name_and_colour(simple_settings: Settings) -> None:
    message = build_message("ERROR", "disk full", {}, simple_settings)

    assert isinstance(message, SimpleMessage)
    assert message.theme_color == colour_for("ERROR")
    body = message.to_json()
    assert "svc - " in body
    assert f'<span style=\\"color:#{colour_for("ERROR")}\\">ERROR</span>' in body
    assert message.text.endswith(": disk full")


def test_simple_message_without_name_or_colour() -> None:
    settings = Settings(name="", show_type=False)

    message = build_message("INFO", "hello", {"ignored": 1}, settings)

    assert message.to_payload() == {"text": "INFO: hello", "themeColor": colour_for("INFO")}


def test_unknown_severity_uses_fallback(card_settings: Settings) -> None:
    message = build_message("VERBOSE", "x", {}, card_settings, NOW)

    assert message.theme_color == DEFAULT_COLOUR
    assert "activityImage" not in message.to_payload()["sections"][0]


def test_card_end_to_end(card_settings: Settings) -> None:
    err = ErrorInfo(message="timeout", trace="#0 a\n#1 b", code=0, file="x.go", line=10)

    message = build_message("ERROR", "request failed", {"userId": 42, "err": err}, card_settings, NOW)

    assert isinstance(message, CardMessage)
    assert message.summary == "ERROR: svc"
    primary, exception = message.sections
    assert [(f.name, f.value) for f in primary.facts] == [
        ("userId", "42"),
        ("Timestamp", "Mon, Oct 19 2026 09:30:05 UTC"),
    ]
    assert primary.activity_title == "svc"
    assert primary.activity_subtitle == f'<span style="color:#{colour_for("ERROR")}">request failed</span>'
    assert primary.activity_image.endswith("/error.png")

    assert exception.activity_title == "err"
    assert exception.activity_subtitle == "timeout"
    assert exception.activity_text == "#0 a\n\n#1 b"
    assert exception.start_group is True
    assert [(f.name, f.value) for f in exception.facts] == [("Code", "0"), ("File", "x.go"), ("Line", "10")]


def test_card_payload_shape(card_settings: Settings) -> None:
    payload = json.loads(build_message("WARNING", "slow", {"tags": ["a", "b"]}, card_settings, NOW).to_json())

    assert set(payload) == {"summary", "themeColor", "sections"}
    section = payload["sections"][0]
    assert section["markdown"] is True
    assert section["facts"][0] == {"name": "tags", "value": '`["a","b"]`'}
    assert "startGroup" not in section


def test_card_empty_context_has_only_timestamp(card_settings: Settings) -> None:
    message = build_message("INFO", "ok", {}, card_settings, NOW)

    assert len(message.sections) == 1
    assert [f.name for f in message.sections[0].facts] == ["Timestamp"]


def test_card_errors_never_become_facts_and_keep_order(card_settings: Settings) -> None:
    context = {"first": _raise("one"), "plain": "v", "second": _raise("two"), "other": 1.5}

    message = build_message("CRITICAL", "boom", context, card_settings, NOW)

    fact_names = [f.name for f in message.sections[0].facts]
    assert fact_names == ["plain", "other", "Timestamp"]
    assert [s.activity_title for s in message.sections[1:]] == ["first", "second"]
    assert [s.activity_subtitle for s in message.sections[1:]] == ["one", "two"]
    assert "\n\n" in message.sections[1].activity_text


def test_card_without_avatar_or_colour() -> None:
    settings = Settings(style="card", name="", show_avatars=False, show_type=False)

    message = build_message("NOTICE", "plain text", {}, settings, NOW)

    assert message.summary == "NOTICE"
    section = message.sections[0]
    assert section.activity_subtitle == "plain text"
    assert section.activity_image is None


def test_build_is_deterministic_apart_from_timestamp(card_settings: Settings) -> None:
    context = {"a": 1, "b": {"c": [1, 2]}}

    first = build_message("INFO", "same", context, card_settings, NOW)
    second = build_message("INFO", "same", context, card_settings, NOW)

    assert first == second
    assert context == {"a": 1, "b": {"c": [1, 2]}}


def test_format_timestamp_converts_zone() -> None:
    assert format_timestamp(NOW, "Asia/Seoul") == "Mon, Oct 19 2026 18:30:05 Asia/Seoul"
    assert format_timestamp(NOW, "Not/AZone") == "Mon, Oct 19 2026 09:30:05 UTC"
