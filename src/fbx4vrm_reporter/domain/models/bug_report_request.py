from datetime import datetime, timezone
from uuid import uuid4

from pydantic import Field

from fbx4vrm_reporter.domain.models.analysis_models import (
    Dynamics,
    Expressions,
    Materials,
    Meshes,
    Skeleton,
)
from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel
from fbx4vrm_reporter.domain.models.environment_models import (
    ConversionResult,
    Environment,
    ExportSettings,
    SourceModel,
)
from fbx4vrm_reporter.domain.models.image_models import AdditionalImage, Screenshot
from fbx4vrm_reporter.domain.models.notification_models import Notifications

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DEFAULT_PLATFORM = "fbx4vrm"


def generate_report_id() -> str:
    """Short random id (8 hex chars)."""
    return uuid4().hex[:8]


def current_timestamp() -> str:
    """UTC timestamp as yyyy-MM-ddTHH:mm:ssZ."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class BugReportRequest(Fbx4vrmModel):
    report_id: str | None = None
    timestamp: str | None = None
    platform: str = DEFAULT_PLATFORM

    environment: Environment | None = None
    export_settings: ExportSettings | None = None
    source_model: SourceModel | None = None
    result: ConversionResult | None = None

    skeleton: Skeleton | None = None
    meshes: Meshes | None = None
    materials: Materials | None = None
    expressions: Expressions | None = None
    dynamics: Dynamics | None = None
    notifications: Notifications | None = None

    screenshot: Screenshot | None = None
    additional_screenshots: list[Screenshot] = Field(default_factory=list)
    additional_images: list[AdditionalImage] = Field(default_factory=list)

    user_comment: str | None = None

    def with_identity(self) -> "BugReportRequest":
        """
        Returns a copy whose report_id and timestamp are populated.
        Values already set are kept as they are.
        """
        updates: dict[str, str] = {}
        if not self.report_id:
            updates["report_id"] = generate_report_id()
        if not self.timestamp:
            updates["timestamp"] = current_timestamp()
        if not updates:
            return self
        return self.model_copy(update=updates)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")
