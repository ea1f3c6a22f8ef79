"""Incoming Webhook 전송 (best-effort)."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass, field

import httpx

from teamslogging.logging import get_logger
from teamslogging.message import Message

logger = get_logger(__name__)


@dataclass
class WebhookTransport:
    """메시지를 웹훅 URL로 한 번 POST한다.

    참고:
    - 실패(연결 오류, 타임아웃, 2xx 외 응답)는 호출자에게 전파하지 않는다.
    - 재시도하지 않는다. 실패 횟수만 `failures`에 센다.
    - `timeout`은 요청 전체의 상한이다. 응답이 조금씩 오더라도 이 시간 안에 반환한다.
    """

    webhook_url: str
    connect_timeout: float = 3.0
    timeout: float = 10.0
    _failures: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def failures(self) -> int:
        return self._failures

    def _request_parts(self, message: Message) -> tuple[bytes, dict[str, str], httpx.Timeout]:
        body = message.to_json().encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }
        return body, headers, httpx.Timeout(self.timeout, connect=self.connect_timeout)

    def deliver(self, message: Message) -> None:
        """동기 전송. 반환값 없음.

        요청은 데몬 스레드에서 실행하고 호출 스레드는 최대 `timeout`초만 기다린다.
        시간을 넘긴 요청의 결과는 버린다.
        """
        if not self.webhook_url:
            return
        errors: list[Exception] = []
        worker = threading.Thread(
            target=self._post,
            args=(message, errors),
            name="teamslogging-deliver",
            daemon=True,
        )
        worker.start()
        worker.join(self.timeout)

        if worker.is_alive():
            self._record_failure(TimeoutError(f"no response within {self.timeout}s"))
        elif errors:
            self._record_failure(errors[0])

    def _post(self, message: Message, errors: list[Exception]) -> None:
        body, headers, timeout = self._request_parts(message)
        try:
            with httpx.Client(timeout=timeout) as client:
                r = client.post(self.webhook_url, content=body, headers=headers)
                r.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            errors.append(e)

    async def adeliver(self, message: Message) -> None:
        """비동기 전송. deliver와 동일하게 예외를 삼킨다."""
        if not self.webhook_url:
            return
        try:
            await asyncio.wait_for(self._apost(message), self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
            self._record_failure(e)

    async def _apost(self, message: Message) -> None:
        body, headers, timeout = self._request_parts(message)
        async with httpx.AsyncClient(timeout=timeout) as client:
            r = await client.post(self.webhook_url, content=body, headers=headers)
            r.raise_for_status()

    def _record_failure(self, error: Exception) -> None:
        with self._lock:
            self._failures += 1
        logger.debug("webhook delivery failed: %r", error)
