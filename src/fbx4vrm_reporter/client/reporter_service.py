from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Coroutine

from fbx4vrm_reporter.client.bug_report_builder import add_screenshot, create_bug_report
from fbx4vrm_reporter.client.fbx4vrm_api_client import Fbx4vrmApiClient
from fbx4vrm_reporter.configuration.reporter_settings import ReporterSettings
from fbx4vrm_reporter.domain.models.api_responses import BugReportResponse
from fbx4vrm_reporter.domain.models.bug_report_request import BugReportRequest
from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse
from fbx4vrm_reporter.infrastructure.imaging.screenshot_loader import load_screenshot, png_dimensions
from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


def _log_task_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Scheduled task {task.get_name()} failed: {exc!r}", exc_info=exc)


class ReporterService:
    """
    Host-facing facade: owns one client and fills in the tool/Unity versions
    from settings. Callers that do not await can hand operations to `schedule`.
    """

    def __init__(self, settings: ReporterSettings, client: Fbx4vrmApiClient | None = None) -> None:
        self.settings = settings
        self.client = client or Fbx4vrmApiClient(settings)
        self._tasks: set[asyncio.Task] = set()

    def schedule(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Runs the coroutine as a task on the current loop and keeps a reference until it completes."""
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(_log_task_failure)
        return task

    async def check_connection(self) -> tuple[bool, str]:
        response = await self.client.get_api_info()
        if response.ok and response.data is not None:
            message = f"Connected to {response.data.api} v{response.data.version}"
            logger.info(f"{message} at {self.client.server_url}")
            return True, message
        logger.warning(f"Connection check against {self.client.server_url} failed: {response.error}")
        return False, response.error or "Connection failed"

    def build_report(self, model_name: str, success: bool, error_message: str | None = None) -> BugReportRequest:
        return create_bug_report(
            model_name,
            success,
            self.settings.package_version,
            self.settings.unity_version,
            error_message,
        )

    async def submit_simple_bug_report(
        self, model_name: str, success: bool, error_message: str | None = None
    ) -> ApiResponse[BugReportResponse]:
        return await self.client.submit_bug_report(self.build_report(model_name, success, error_message))

    async def submit_bug_report_with_screenshot(
        self,
        model_name: str,
        success: bool,
        error_message: str | None,
        screenshot_path: str | Path,
    ) -> ApiResponse[BugReportResponse]:
        """Same as `submit_simple_bug_report`; a screenshot that cannot be read is left out."""
        request = self.build_report(model_name, success, error_message)
        image = load_screenshot(screenshot_path)
        if image:
            width, height = png_dimensions(image)
            request = add_screenshot(request, image, width, height)
        return await self.client.submit_bug_report(request)
