"""Pure helpers that assemble bug report requests. None of them perform I/O."""

import base64
import platform

from fbx4vrm_reporter.domain.models.bug_report_request import (
    DEFAULT_PLATFORM,
    BugReportRequest,
    current_timestamp,
    generate_report_id,
)
from fbx4vrm_reporter.domain.models.environment_models import ConversionResult, Environment, SourceModel
from fbx4vrm_reporter.domain.models.image_models import AdditionalImage, Screenshot

PNG_FORMAT = "PNG"


def _to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def create_bug_report(
    model_name: str,
    success: bool,
    package_version: str,
    unity_version: str,
    error_message: str | None = None,
    stopped_at_processor: str | None = None,
) -> BugReportRequest:
    return BugReportRequest(
        report_id=generate_report_id(),
        timestamp=current_timestamp(),
        platform=DEFAULT_PLATFORM,
        environment=Environment(
            package_version=package_version,
            unity_version=unity_version,
            platform=platform.system() or None,
        ),
        source_model=SourceModel(name=model_name, is_new_avatar=True),
        result=ConversionResult(
            success=success,
            error_message=error_message,
            stopped_at_processor=stopped_at_processor,
        ),
    )


def create_bug_report_for_existing_avatar(
    avatar_id: str,
    model_name: str,
    success: bool,
    package_version: str,
    unity_version: str,
    error_message: str | None = None,
    stopped_at_processor: str | None = None,
) -> BugReportRequest:
    request = create_bug_report(
        model_name, success, package_version, unity_version, error_message, stopped_at_processor
    )
    source_model = request.source_model.model_copy(update={"avatar_id": avatar_id, "is_new_avatar": False})
    return request.model_copy(update={"source_model": source_model})


def add_screenshot(request: BugReportRequest, image_bytes: bytes, width: int, height: int) -> BugReportRequest:
    """Sets the primary screenshot. Empty image data leaves the request unchanged."""
    if not image_bytes:
        return request

    screenshot = Screenshot(
        format=PNG_FORMAT,
        width=width,
        height=height,
        base64=_to_base64(image_bytes),
    )
    return request.model_copy(update={"screenshot": screenshot})


def add_multi_angle_screenshots(
    request: BugReportRequest,
    screenshots: dict[str, bytes],
    width: int,
    height: int,
) -> BugReportRequest:
    """
    Appends one image per angle to the primary screenshot, in the dict's insertion order.

    An existing screenshot keeps its dimensions and images; angles with empty
    image data are skipped.
    """
    if not screenshots:
        return request

    current = request.screenshot or Screenshot(format=PNG_FORMAT, width=width, height=height)
    angles = list(current.angles)
    images = list(current.base64_images)
    for angle, image_bytes in screenshots.items():
        if not image_bytes:
            continue
        angles.append(angle)
        images.append(_to_base64(image_bytes))

    screenshot = current.model_copy(update={"angles": angles, "base64_images": images})
    return request.model_copy(update={"screenshot": screenshot})


def add_additional_image(
    request: BugReportRequest,
    image_bytes: bytes,
    filename: str,
    format: str = PNG_FORMAT,
    description: str | None = None,
) -> BugReportRequest:
    if not image_bytes:
        return request

    image = AdditionalImage(
        filename=filename,
        format=format,
        base64=_to_base64(image_bytes),
        description=description,
    )
    return request.model_copy(update={"additional_images": [*request.additional_images, image]})
