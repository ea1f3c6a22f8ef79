import logging

from teamslogging.handler import TeamsLogHandler
from teamslogging.logging.structured_logger import register_level_names
from teamslogging.settings import Settings, get_settings


def create_handler(settings: Settings | None = None) -> TeamsLogHandler:
    """설정으로 TeamsLogHandler를 생성한다."""
    return TeamsLogHandler.from_settings(settings or get_settings())


def install_handler(logger: logging.Logger | str | None = None, settings: Settings | None = None) -> TeamsLogHandler:
    """핸들러를 만들어 로거(기본: 루트)에 붙인다."""
    register_level_names()
    if not isinstance(logger, logging.Logger):
        logger = logging.getLogger(logger)
    handler = create_handler(settings)
    logger.addHandler(handler)
    return handler
