"""로그 레코드와 컨텍스트 값 모델."""

from __future__ import annotations

import dataclasses
import json
import logging
import traceback
from collections.abc import Mapping, Set
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Union

from pydantic import BaseModel


class Severity(IntEnum):
    """RFC 5424 심각도. 값은 표준 logging 레벨 번호에 맞춘다."""

    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    ALERT = 60
    EMERGENCY = 70

    @classmethod
    def parse(cls, name: str) -> Severity:
        """이름으로 조회 (대소문자 무시). 모르는 이름이면 ValueError."""
        key = name.strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown severity: {name!r}") from None

    @classmethod
    def from_levelno(cls, levelno: int) -> Severity:
        """levelno 이하인 가장 높은 심각도. DEBUG 미만은 DEBUG."""
        matched = cls.DEBUG
        for member in cls:
            if member <= levelno:
                matched = member
        return matched


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass(frozen=True)
class Scalar:
    text: str


@dataclass(frozen=True)
class Structured:
    """JSON으로 직렬화된 복합 값."""

    text: str


@dataclass(frozen=True)
class ErrorInfo:
    message: str
    trace: str
    code: Any = 0
    file: str = ""
    line: int = 0

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        tb = exc.__traceback__
        frames = traceback.extract_tb(tb) if tb is not None else []
        trace = "".join(traceback.format_list(frames)).rstrip("\n")
        innermost = frames[-1] if frames else None

        code = getattr(exc, "errno", None)
        if code is None:
            code = getattr(exc, "code", None)
        if code is None or not isinstance(code, (int, str)):
            code = 0

        return cls(
            message=_safe_str(exc),
            trace=trace,
            code=code,
            file=innermost.filename if innermost else "",
            line=(innermost.lineno or 0) if innermost else 0,
        )


ContextValue = Union[Scalar, Structured, ErrorInfo]


def classify(value: Any) -> ContextValue:
    """컨텍스트 값을 Scalar / Structured / ErrorInfo 중 하나로 분류한다."""
    if isinstance(value, (Scalar, Structured, ErrorInfo)):
        return value
    if isinstance(value, BaseException):
        return ErrorInfo.from_exception(value)
    if isinstance(value, (str, bytes, int, float)) or value is None:
        return Scalar(_safe_str(value))
    if isinstance(value, (Mapping, list, tuple, Set, BaseModel)) or _is_dataclass_instance(value):
        return Structured(_encode(value))
    return Scalar(_safe_str(value))


def classify_context(context: Mapping[str, Any] | None) -> Mapping[str, ContextValue]:
    """입력 순서를 유지한 채 분류된 읽기 전용 매핑을 반환한다."""
    if not context:
        return MappingProxyType({})
    return MappingProxyType({str(key): classify(value) for key, value in context.items()})


@dataclass(frozen=True)
class LogRecord:
    """웹훅으로 전달할 로그 레코드."""

    level_name: str
    message: str
    context: Mapping[str, ContextValue] = field(default_factory=dict)
    level: int = 0
    logger_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", classify_context(self.context))
        if not self.level:
            try:
                object.__setattr__(self, "level", int(Severity.parse(self.level_name)))
            except ValueError:
                pass

    @classmethod
    def from_logging(cls, record: logging.LogRecord) -> LogRecord:
        """표준 logging 레코드 변환. extra={"context": {...}} 와 exc_info를 사용한다."""
        context: dict[str, Any] = {}
        extra_context = getattr(record, "context", None)
        if isinstance(extra_context, Mapping):
            context.update(extra_context)

        if record.exc_info and record.exc_info[1] is not None and "exception" not in context:
            context["exception"] = record.exc_info[1]

        severity = Severity.from_levelno(record.levelno)
        return cls(
            level_name=severity.name,
            message=record.getMessage(),
            context=context,
            level=record.levelno,
            logger_name=record.name,
        )


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if _is_dataclass_instance(value):
        return dataclasses.asdict(value)
    if isinstance(value, Set):
        return list(value)
    return str(value)


def _encode(value: Any) -> str:
    try:
        if isinstance(value, BaseModel) or _is_dataclass_instance(value):
            value = _to_jsonable(value)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_to_jsonable)
    except (TypeError, ValueError, RecursionError):
        return _safe_repr(value)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return _safe_repr(value)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"
