"""표준 logging 핸들러: 레코드 -> 메시지 -> 웹훅."""

from __future__ import annotations

import logging
from typing import Literal

from teamslogging.builder import build_from_record
from teamslogging.logging import get_logger
from teamslogging.logging.structured_logger import PACKAGE_LOGGER
from teamslogging.records import LogRecord, Severity
from teamslogging.settings import Settings
from teamslogging.transport import WebhookTransport

logger = get_logger(__name__)


class TeamsLogHandler(logging.Handler):
    """최소 심각도 이상의 레코드를 Teams 웹훅으로 보낸다.

    호출 스레드에서 동기적으로 빌드/전송한다. 버퍼링, 배치 없음.
    """

    def __init__(
        self,
        webhook_url: str,
        level: Severity | int | str = Severity.DEBUG,
        style: Literal["simple", "card"] = "simple",
        name: str = "Default",
        bubble: bool = True,
        *,
        settings: Settings | None = None,
        transport: WebhookTransport | None = None,
    ) -> None:
        base = settings if settings is not None else Settings()
        self.settings = base.with_overrides(
            webhook_url=webhook_url,
            level=level,
            style=style,
            name=name,
            bubble=bubble,
        )
        super().__init__(int(self.settings.level))
        self.transport = transport or WebhookTransport(
            webhook_url,
            connect_timeout=self.settings.connect_timeout,
            timeout=self.settings.timeout,
        )

    @classmethod
    def from_settings(cls, settings: Settings, transport: WebhookTransport | None = None) -> TeamsLogHandler:
        return cls(
            settings.webhook_url,
            level=settings.level,
            style=settings.style,
            name=settings.name,
            bubble=settings.bubble,
            settings=settings,
            transport=transport,
        )

    @property
    def bubble(self) -> bool:
        return self.settings.bubble

    def is_handling(self, record: LogRecord) -> bool:
        # 레벨을 모르는 레코드(level=0)는 DEBUG로 취급
        level = record.level or Severity.DEBUG
        return bool(self.settings.webhook_url) and level >= self.settings.level

    def on_log_record(self, record: LogRecord) -> bool:
        """레코드 처리. 체인을 여기서 멈춰야 하면 True.

        임계값 미만이면 빌드/전송 없이 버리고 False.
        심각도 이름을 모르는 레코드는 DEBUG 임계값에서만 전송된다.
        """
        if not self.settings.webhook_url:
            logger.debug("dropped %s record: webhook url not configured", record.level_name)
            return False
        if not self.is_handling(record):
            logger.debug("dropped %s record below %s", record.level_name, self.settings.level.name)
            return False

        message = build_from_record(record, self.settings)
        self.transport.deliver(message)
        return not self.bubble

    def handle(self, record: logging.LogRecord) -> bool:
        # 동시 전송을 막지 않도록 핸들러 락 없이 emit
        rv = self.filter(record)
        if rv:
            self.emit(record)
        return bool(rv)

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == PACKAGE_LOGGER or record.name.startswith(PACKAGE_LOGGER + "."):
            return
        try:
            self.on_log_record(LogRecord.from_logging(record))
        except Exception:
            self.handleError(record)

