from fbx4vrm_reporter.infrastructure.http.fbx4vrm_http_client import Fbx4vrmHttpClient
from fbx4vrm_reporter.infrastructure.http.response_processor import PARSE_ERROR_MESSAGE, ResponseProcessor

__all__ = [
    "Fbx4vrmHttpClient",
    "PARSE_ERROR_MESSAGE",
    "ResponseProcessor",
]
