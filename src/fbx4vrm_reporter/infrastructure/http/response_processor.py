from typing import TypeVar

from pydantic import BaseModel, ValidationError

from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse
from fbx4vrm_reporter.domain.value_objects.transport_result import TransportFailure, TransportResult
from fbx4vrm_reporter.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

_M = TypeVar("_M", bound=BaseModel)

PARSE_ERROR_MESSAGE = "Failed to parse response JSON"


class ResponseProcessor:
    """Turns a raw TransportResult into a typed ApiResponse."""

    def process(self, result: TransportResult, model: type[_M]) -> ApiResponse[_M]:
        if result.succeeded:
            return self._parse(result, model)

        if result.failure == TransportFailure.CONNECTION:
            error = f"Connection error: {result.error}"
        else:
            error = f"HTTP error {result.status_code}: {result.error}"

        logger.error(f"Request failed: {error}")
        return ApiResponse.failure(error, result.status_code, result.body)

    def _parse(self, result: TransportResult, model: type[_M]) -> ApiResponse[_M]:
        if not result.body:
            return ApiResponse.failure(PARSE_ERROR_MESSAGE, result.status_code, result.body)
        try:
            data = model.model_validate_json(result.body)
        except ValidationError as e:
            logger.warning(f"Failed to parse {model.__name__}: {e.error_count()} error(s)")
            return ApiResponse.failure(PARSE_ERROR_MESSAGE, result.status_code, result.body)
        return ApiResponse.success(data, result.status_code, result.body)
