from fbx4vrm_reporter.configuration.reporter_settings import ReporterSettings
from fbx4vrm_reporter.domain.models.api_responses import (
    ApiInfoResponse,
    AvatarListResponse,
    BugReportResponse,
    QueueStatsResponse,
    QueueSubmitResponse,
)
from fbx4vrm_reporter.domain.models.bug_report_request import BugReportRequest
from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse
from fbx4vrm_reporter.infrastructure.http.fbx4vrm_http_client import Fbx4vrmHttpClient
from fbx4vrm_reporter.infrastructure.http.response_processor import ResponseProcessor
from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

API_PREFIX = "/api/v1/fbx4vrm"
QUEUE_PREFIX = "/bug-reports/queue"


class Fbx4vrmApiClient:
    """
    Client for the FBX4VRM bug report server.

    Each operation sends exactly one request and returns an ApiResponse; nothing
    is retried here. Reconfigure (`configure`, `verbose_logging`) only between
    requests, never while one is in flight.

    Example:
        client = Fbx4vrmApiClient(ReporterSettings(server_url="https://reports.example.com:8443"))
        request = create_bug_report("MyAvatar", False, "1.0.0", "2022.3.22f1", "Material conversion failed")
        response = await client.submit_to_queue(request)
        if response.ok and response.data.is_success:
            print(response.data.queue_id)
    """

    def __init__(
        self,
        settings: ReporterSettings,
        http_client: Fbx4vrmHttpClient | None = None,
        response_processor: ResponseProcessor | None = None,
    ) -> None:
        self.settings = settings
        self.http_client = http_client or Fbx4vrmHttpClient(settings)
        self.response_processor = response_processor or ResponseProcessor()

    @property
    def server_url(self) -> str:
        return self.http_client.base_url

    @property
    def verbose_logging(self) -> bool:
        return self.http_client.verbose_logging

    @verbose_logging.setter
    def verbose_logging(self, enabled: bool) -> None:
        self.http_client.verbose_logging = enabled

    def configure(self, server_url: str) -> None:
        self.http_client.set_base_url(server_url)

    # API info / avatars

    async def get_api_info(self) -> ApiResponse[ApiInfoResponse]:
        result = await self.http_client.get(API_PREFIX)
        return self.response_processor.process(result, ApiInfoResponse)

    async def get_avatar_list(self) -> ApiResponse[AvatarListResponse]:
        result = await self.http_client.get(f"{API_PREFIX}/avatars")
        return self.response_processor.process(result, AvatarListResponse)

    # Queue submission (recommended)

    async def submit_to_queue(self, request: BugReportRequest) -> ApiResponse[QueueSubmitResponse]:
        """Hands the report to the server queue; it is processed in the background."""
        request = request.with_identity()
        logger.info(f"Submitting report {request.report_id} to queue")
        result = await self.http_client.post_json(f"{QUEUE_PREFIX}/submit", request.to_payload())
        return self.response_processor.process(result, QueueSubmitResponse)

    async def get_queue_stats(self) -> ApiResponse[QueueStatsResponse]:
        result = await self.http_client.get(f"{QUEUE_PREFIX}/stats")
        return self.response_processor.process(result, QueueStatsResponse)

    # Direct submission (legacy)

    async def submit_bug_report(self, request: BugReportRequest) -> ApiResponse[BugReportResponse]:
        """Legacy path processed synchronously by the server. Prefer submit_to_queue."""
        request = request.with_identity()
        logger.info(f"Submitting report {request.report_id} directly")
        result = await self.http_client.post_json(f"{API_PREFIX}/bug-reports", request.to_payload())
        return self.response_processor.process(result, BugReportResponse)
