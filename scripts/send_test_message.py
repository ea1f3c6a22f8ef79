"""웹훅 URL 확인용 테스트 메시지 전송 스크립트."""

import logging
from typing import Optional

import typer
from pydantic import ValidationError

from teamslogging.builder import build_from_record
from teamslogging.logging import configure_console
from teamslogging.records import LogRecord, Severity
from teamslogging.settings import get_settings
from teamslogging.transport import WebhookTransport

app = typer.Typer()


@app.command()
def send(
    message: str = typer.Argument("Teams logging test message", help="전송할 메시지"),
    level: str = typer.Option("info", "--level", "-l", help="심각도 (debug ~ emergency)"),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="simple 또는 card (기본: 설정값)"),
    with_error: bool = typer.Option(False, "--with-error", help="예외 섹션 포함 (card)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="전송 실패를 콘솔에 출력"),
) -> None:
    """설정된 웹훅으로 테스트 레코드 1건 전송."""
    settings = get_settings()

    if not settings.webhook_url:
        typer.echo("Error: TEAMS_WEBHOOK_URL not set in .env", err=True)
        raise typer.Exit(1)

    try:
        severity = Severity.parse(level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    if style is not None:
        try:
            settings = settings.with_overrides(style=style)
        except ValidationError:
            typer.echo(f"Error: unknown style {style!r} (simple | card)", err=True)
            raise typer.Exit(2)
    if verbose:
        configure_console(logging.DEBUG)

    context: dict = {"source": "send_test_message", "level": severity.name}
    if with_error:
        try:
            raise RuntimeError("test exception")
        except RuntimeError as exc:
            context["exception"] = exc

    transport = WebhookTransport(
        settings.webhook_url,
        connect_timeout=settings.connect_timeout,
        timeout=settings.timeout,
    )
    record = LogRecord(level_name=severity.name, message=message, context=context, level=int(severity))
    payload = build_from_record(record, settings)

    typer.echo(payload.to_json())
    transport.deliver(payload)

    if transport.failures:
        typer.echo("\n✗ Delivery failed", err=True)
        raise typer.Exit(1)
    typer.echo("\n✓ Message sent")


if __name__ == "__main__":
    app()
