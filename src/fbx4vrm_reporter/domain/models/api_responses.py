from pydantic import Field

from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel

BUG_REPORT_ACCEPTED = "accepted"
QUEUE_SUBMIT_QUEUED = "queued"


class ApiInfoResponse(Fbx4vrmModel):
    api: str | None = None
    version: str | None = None
    documentation: str | None = None


class AvatarInfo(Fbx4vrmModel):
    """
    One row of the server's avatar catalog.

    `issue_number` / `github_issue_url` point to the issue of this avatar version,
    `parent_issue_*` to the issue of the avatar itself. `avatar_uid` is derived
    from content (booth:{id} or vrm:{hash}).
    """

    id: str | None = None
    name: str | None = None
    display_name: str | None = None
    package_version: str | None = None
    booth_url: str | None = None
    avatar_number: int = 0
    version_index: int = 0
    issue_number: str | None = None
    github_issue_url: str | None = None
    parent_issue_number: str | None = None
    parent_issue_url: str | None = None
    report_count: int = 0
    last_reported: str | None = None
    platforms: list[str] = Field(default_factory=list)
    result_success: bool | None = None
    avatar_uid: str | None = None
    source_type: str | None = None
    author: str | None = None
    reference_url: str | None = None

    def get_display_name(self) -> str | None:
        return self.display_name if self.display_name else self.name


class AvatarListResponse(Fbx4vrmModel):
    success: bool = False
    avatars: list[AvatarInfo] = Field(default_factory=list)


class BugReportResponse(Fbx4vrmModel):
    status: str | None = None
    report_id: str | None = None
    avatar_id: str | None = None
    avatar_name: str | None = None
    tracking_url: str | None = None
    github_issue_url: str | None = None
    is_new_issue: bool = False

    @property
    def is_success(self) -> bool:
        return self.status == BUG_REPORT_ACCEPTED


class QueueSubmitResponse(Fbx4vrmModel):
    status: str | None = None
    queue_id: str | None = None
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == QUEUE_SUBMIT_QUEUED


class QueueStatsResponse(Fbx4vrmModel):
    pending: int = 0
    processing: int = 0
    completed: int = 0
    failed: int = 0
