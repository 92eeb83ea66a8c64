from pydantic import Field

from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel


class NotificationSummary(Fbx4vrmModel):
    info: int = 0
    warning: int = 0
    error: int = 0


class NotificationItem(Fbx4vrmModel):
    processor_id: str | None = None
    message: str | None = None
    details: str | None = None
    timestamp: str | None = None


class Notifications(Fbx4vrmModel):
    summary: NotificationSummary | None = None
    errors: list[NotificationItem] = Field(default_factory=list)
    warnings: list[NotificationItem] = Field(default_factory=list)
