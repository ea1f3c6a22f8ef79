"""로그 레코드를 Microsoft Teams Incoming Webhook으로 전달한다."""

from teamslogging.builder import build_from_record, build_message
from teamslogging.factory import create_handler, install_handler
from teamslogging.handler import TeamsLogHandler
from teamslogging.message import CardMessage, Fact, Message, Section, SimpleMessage
from teamslogging.palette import avatar_for, colour_for
from teamslogging.records import ErrorInfo, LogRecord, Scalar, Severity, Structured, classify
from teamslogging.settings import Settings, get_settings
from teamslogging.transport import WebhookTransport

__all__ = [
    "CardMessage",
    "ErrorInfo",
    "Fact",
    "LogRecord",
    "Message",
    "Scalar",
    "Section",
    "Settings",
    "Severity",
    "SimpleMessage",
    "Structured",
    "TeamsLogHandler",
    "WebhookTransport",
    "avatar_for",
    "build_from_record",
    "build_message",
    "classify",
    "colour_for",
    "create_handler",
    "get_settings",
    "install_handler",
]
