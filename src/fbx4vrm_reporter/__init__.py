from fbx4vrm_reporter.client import (
    CallbackAdapter,
    Fbx4vrmApiClient,
    ReporterService,
    RetryPolicy,
)
from fbx4vrm_reporter.configuration import ReporterSettings
from fbx4vrm_reporter.domain.value_objects import ApiResponse

__all__ = [
    "ApiResponse",
    "CallbackAdapter",
    "Fbx4vrmApiClient",
    "ReporterService",
    "ReporterSettings",
    "RetryPolicy",
]
