"""구조화된 로깅 모듈 (컨텍스트를 Teams 웹훅 핸들러로 전달)."""

from teamslogging.logging.structured_logger import (
    ContextFormatter,
    StructuredLogger,
    configure_console,
    get_logger,
)

__all__ = ["ContextFormatter", "StructuredLogger", "configure_console", "get_logger"]
