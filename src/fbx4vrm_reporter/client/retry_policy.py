from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse

_R = TypeVar("_R", bound=ApiResponse[Any])


def _retryable(response: ApiResponse[Any]) -> bool:
    """Connection failures (status 0) and 5xx answers are worth another attempt."""
    if response.ok:
        return False
    return response.status_code == 0 or response.status_code >= 500


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """
    Caller-side retry for client operations. The client itself never retries.

        policy = RetryPolicy(max_attempts=3)
        response = await policy.run(lambda: client.submit_to_queue(request))

    Returns the last response when every attempt failed.
    """

    max_attempts: int = 3
    initial_wait: float = 0.25
    max_wait: float = 5.0
    jitter: float = 1.0

    async def run(self, fn: Callable[[], Awaitable[_R]]) -> _R:
        try:
            return await self._retrying()(fn)
        except RetryError as err:
            return err.last_attempt.result()

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_result(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.initial_wait, max=self.max_wait) + wait_random(0, self.jitter),
        )
