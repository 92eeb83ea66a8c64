from fbx4vrm_reporter.domain.models.analysis_models import (
    ArmatureRotation,
    BoneInfo,
    BoneOrientationIssue,
    BoneOrientations,
    Dynamics,
    DynamicsConversionResult,
    ExpressionConflict,
    ExpressionMapping,
    Expressions,
    MaterialConversionResult,
    Materials,
    MaterialWarning,
    Meshes,
    MeshInfo,
    ShaderCount,
    Skeleton,
    UnsupportedShader,
)
from fbx4vrm_reporter.domain.models.api_responses import (
    ApiInfoResponse,
    AvatarInfo,
    AvatarListResponse,
    BugReportResponse,
    QueueStatsResponse,
    QueueSubmitResponse,
)
from fbx4vrm_reporter.domain.models.bug_report_request import (
    BugReportRequest,
    current_timestamp,
    generate_report_id,
)
from fbx4vrm_reporter.domain.models.environment_models import (
    ConversionResult,
    Environment,
    ExportSettings,
    SourceModel,
    VrmMeta,
)
from fbx4vrm_reporter.domain.models.image_models import AdditionalImage, Screenshot
from fbx4vrm_reporter.domain.models.notification_models import (
    NotificationItem,
    Notifications,
    NotificationSummary,
)

__all__ = [
    "AdditionalImage",
    "ApiInfoResponse",
    "ArmatureRotation",
    "AvatarInfo",
    "AvatarListResponse",
    "BoneInfo",
    "BoneOrientationIssue",
    "BoneOrientations",
    "BugReportRequest",
    "BugReportResponse",
    "ConversionResult",
    "Dynamics",
    "DynamicsConversionResult",
    "Environment",
    "ExportSettings",
    "ExpressionConflict",
    "ExpressionMapping",
    "Expressions",
    "MaterialConversionResult",
    "MaterialWarning",
    "Materials",
    "MeshInfo",
    "Meshes",
    "NotificationItem",
    "NotificationSummary",
    "Notifications",
    "QueueStatsResponse",
    "QueueSubmitResponse",
    "Screenshot",
    "ShaderCount",
    "Skeleton",
    "SourceModel",
    "UnsupportedShader",
    "VrmMeta",
    "current_timestamp",
    "generate_report_id",
]
