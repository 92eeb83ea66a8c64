from fbx4vrm_reporter.client.bug_report_builder import (
    add_additional_image,
    add_multi_angle_screenshots,
    add_screenshot,
    create_bug_report,
    create_bug_report_for_existing_avatar,
)
from fbx4vrm_reporter.client.callback_adapter import CallbackAdapter
from fbx4vrm_reporter.client.fbx4vrm_api_client import Fbx4vrmApiClient
from fbx4vrm_reporter.client.reporter_service import ReporterService
from fbx4vrm_reporter.client.retry_policy import RetryPolicy

__all__ = [
    "CallbackAdapter",
    "Fbx4vrmApiClient",
    "ReporterService",
    "RetryPolicy",
    "add_additional_image",
    "add_multi_angle_screenshots",
    "add_screenshot",
    "create_bug_report",
    "create_bug_report_for_existing_avatar",
]
