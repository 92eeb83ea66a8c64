import json
from typing import Any

import httpx

from fbx4vrm_reporter.configuration.reporter_settings import ReporterSettings
from fbx4vrm_reporter.domain.value_objects.transport_result import TransportFailure, TransportResult
from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import LoggerFactoryService
from fbx4vrm_reporter.infrastructure.observability.redaction_service import redact_text

logger = LoggerFactoryService.build_logger(__name__)


class Fbx4vrmHttpClient:
    """
    Async transport for the report server.

    Paths are appended verbatim to the base URL (trailing slash trimmed).
    Failures never raise: connection and HTTP errors come back inside the
    TransportResult so the caller can build an error envelope.
    """

    def __init__(self, settings: ReporterSettings) -> None:
        self.base_url = settings.server_url.rstrip("/")
        self.timeout = settings.timeout_seconds
        self.verify = not settings.skip_certificate_validation
        self.verbose_logging = settings.verbose_logging
        if not self.verify:
            logger.warning(f"Certificate validation disabled for {self.base_url}. Use only with development servers.")

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def get(self, path: str) -> TransportResult:
        url = f"{self.base_url}{path}"
        self._log_verbose(f"GET {url}")
        return await self._send("GET", url)

    async def post_json(self, path: str, json_data: dict[str, Any]) -> TransportResult:
        url = f"{self.base_url}{path}"
        body = json.dumps(json_data, ensure_ascii=False)
        self._log_verbose(f"POST {url}")
        self._log_verbose(f"Request body: {redact_text(body)}")
        return await self._send("POST", url, content=body.encode("utf-8"))

    async def _send(self, method: str, url: str, content: bytes | None = None) -> TransportResult:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, verify=self.verify, follow_redirects=True) as client:
                response = await client.request(method, url, headers=self._get_headers(), content=content)
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            return TransportResult(status_code=0, error=detail, failure=TransportFailure.CONNECTION)

        self._log_verbose(f"Response code: {response.status_code}")
        self._log_verbose(f"Response body: {redact_text(response.text)}")

        if not response.is_success:
            detail = response.reason_phrase or f"status {response.status_code}"
            return TransportResult(
                status_code=response.status_code,
                body=response.text,
                error=detail,
                failure=TransportFailure.HTTP,
            )
        return TransportResult(status_code=response.status_code, body=response.text)

    def _log_verbose(self, message: str) -> None:
        if self.verbose_logging:
            logger.info(message)
