from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from fbx4vrm_reporter.client.fbx4vrm_api_client import Fbx4vrmApiClient
from fbx4vrm_reporter.domain.models.api_responses import (
    ApiInfoResponse,
    AvatarListResponse,
    BugReportResponse,
    QueueStatsResponse,
    QueueSubmitResponse,
)
from fbx4vrm_reporter.domain.models.bug_report_request import BugReportRequest
from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse

_T = TypeVar("_T")

UNKNOWN_ERROR = "Unknown error"

OnError = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class Unwrapped:
    """Either a value or an error message, never both."""

    value: object | None = None
    error: str | None = None


def _first_not_none(*values: str | None) -> str:
    for value in values:
        if value is not None:
            return value
    return UNKNOWN_ERROR


def unwrap(response: ApiResponse[_T]) -> Unwrapped:
    if response.ok and response.data is not None:
        return Unwrapped(value=response.data)
    return Unwrapped(error=_first_not_none(response.error))


def unwrap_queue_submit(response: ApiResponse[QueueSubmitResponse]) -> Unwrapped:
    data = response.data
    if response.ok and data is not None and data.is_success:
        return Unwrapped(value=data)
    return Unwrapped(error=_first_not_none(response.error, data.message if data else None))


def unwrap_bug_report(response: ApiResponse[BugReportResponse]) -> Unwrapped:
    data = response.data
    if response.ok and data is not None and data.is_success:
        return Unwrapped(value=data)
    return Unwrapped(error=_first_not_none(response.error, data.status if data else None))


def _dispatch(unwrapped: Unwrapped, on_success: Callable[[_T], None], on_error: OnError | None) -> None:
    if unwrapped.error is None:
        on_success(unwrapped.value)  # type: ignore[arg-type]
    elif on_error is not None:
        on_error(unwrapped.error)


class CallbackAdapter:
    """
    Success/error callback style over Fbx4vrmApiClient.

    Business rejections (e.g. a queue submit whose status is not "queued") go
    to `on_error` like transport failures. Exactly one callback runs per call.
    """

    def __init__(self, client: Fbx4vrmApiClient) -> None:
        self.client = client

    async def get_api_info(
        self, on_success: Callable[[ApiInfoResponse], None], on_error: OnError | None = None
    ) -> None:
        _dispatch(unwrap(await self.client.get_api_info()), on_success, on_error)

    async def get_avatar_list(
        self, on_success: Callable[[AvatarListResponse], None], on_error: OnError | None = None
    ) -> None:
        _dispatch(unwrap(await self.client.get_avatar_list()), on_success, on_error)

    async def submit_to_queue(
        self,
        request: BugReportRequest,
        on_success: Callable[[QueueSubmitResponse], None],
        on_error: OnError | None = None,
    ) -> None:
        response = await self.client.submit_to_queue(request)
        _dispatch(unwrap_queue_submit(response), on_success, on_error)

    async def get_queue_stats(
        self, on_success: Callable[[QueueStatsResponse], None], on_error: OnError | None = None
    ) -> None:
        _dispatch(unwrap(await self.client.get_queue_stats()), on_success, on_error)

    async def submit_bug_report(
        self,
        request: BugReportRequest,
        on_success: Callable[[BugReportResponse], None],
        on_error: OnError | None = None,
    ) -> None:
        response = await self.client.submit_bug_report(request)
        _dispatch(unwrap_bug_report(response), on_success, on_error)
