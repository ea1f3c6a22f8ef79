"""키워드 컨텍스트를 받는 로거 래퍼."""

import logging
import sys
from typing import Any

from teamslogging.records import Severity

PACKAGE_LOGGER = "teamslogging"


def register_level_names() -> None:
    """표준 logging에 없는 NOTICE/ALERT/EMERGENCY 이름 등록."""
    for severity in (Severity.NOTICE, Severity.ALERT, Severity.EMERGENCY):
        if logging.getLevelName(severity.value) != severity.name:
            logging.addLevelName(severity.value, severity.name)


class ContextFormatter(logging.Formatter):
    """콘솔 출력 시 record.context를 `| key=value` 형태로 덧붙인다."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = getattr(record, "context", None)
        if context:
            extra_str = " | ".join(f"{k}={v}" for k, v in context.items())
            text = f"{text} | {extra_str}"
        return text


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        ContextFormatter(
            "[%(asctime)s] %(levelname)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """패키지 내부 진단용 로거."""
    return logging.getLogger(name)


def configure_console(log_level: int = logging.DEBUG, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """내부 진단 로그를 콘솔로 출력한다 (스크립트용)."""
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(_console_handler(log_level))
    return logger


class StructuredLogger:
    """키워드 인자를 컨텍스트로 넘기는 로거.

    예:
        log = StructuredLogger("billing", handlers=[teams_handler])
        log.error("결제 실패", order_id=42, error=exc)
    """

    def __init__(
        self,
        name: str = "app",
        handlers: list[logging.Handler] | None = None,
        console_output: bool = True,
        log_level: int = logging.DEBUG,
    ) -> None:
        """로거 초기화.

        Args:
            name: 로거 이름
            handlers: 추가로 붙일 핸들러 (예: TeamsLogHandler)
            console_output: 콘솔 출력 여부
            log_level: 로그 레벨
        """
        register_level_names()
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)
        self.logger.handlers.clear()

        if console_output:
            self.logger.addHandler(_console_handler(log_level))
        for handler in handlers or []:
            self.logger.addHandler(handler)

    def debug(self, message: str, **context: Any) -> None:
        self._log(Severity.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(Severity.INFO, message, context)

    def notice(self, message: str, **context: Any) -> None:
        self._log(Severity.NOTICE, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(Severity.WARNING, message, context)

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._log(Severity.ERROR, message, context, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = True, **context: Any) -> None:
        self._log(Severity.CRITICAL, message, context, exc_info=exc_info)

    def alert(self, message: str, exc_info: bool = True, **context: Any) -> None:
        self._log(Severity.ALERT, message, context, exc_info=exc_info)

    def emergency(self, message: str, exc_info: bool = True, **context: Any) -> None:
        self._log(Severity.EMERGENCY, message, context, exc_info=exc_info)

    def _log(
        self,
        severity: Severity,
        message: str,
        context: dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        # exc_info=True 인데 처리 중인 예외가 없으면 logging이 (None, None, None)을 넣는다
        self.logger.log(int(severity), message, exc_info=exc_info, extra={"context": context})
