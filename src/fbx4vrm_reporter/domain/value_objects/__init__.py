from fbx4vrm_reporter.domain.value_objects.api_response import ApiResponse
from fbx4vrm_reporter.domain.value_objects.transport_result import TransportFailure, TransportResult

__all__ = [
    "ApiResponse",
    "TransportFailure",
    "TransportResult",
]
