from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel


class Environment(Fbx4vrmModel):
    package_version: str | None = None
    unity_version: str | None = None
    platform: str | None = None
    univrm_version: str | None = None
    render_pipeline: str | None = None


class ExportSettings(Fbx4vrmModel):
    vrm_version: int = 0
    preset_name: str | None = None
    output_path: str | None = None
    enable_liltoon_conversion: bool = False
    enable_hdr_clamp: bool = False
    enable_outline_conversion: bool = False
    transparent_mode: str | None = None
    enable_tpose_normalization: bool = False
    enable_armature_rotation_bake: bool = False
    enable_bone_orientation_normalization: bool = False
    enable_expression_auto_mapping: bool = False
    expression_naming_convention: str | None = None
    enable_springbone_conversion: bool = False
    enable_collider_conversion: bool = False
    output_folder: str | None = None
    file_name_mode: str | None = None
    custom_file_name: str | None = None


class VrmMeta(Fbx4vrmModel):
    """VRM 0.x metadata embedded in the exported file. Used by the server to identify the avatar."""

    title: str | None = None
    author: str | None = None
    version: str | None = None
    contact_information: str | None = None
    reference: str | None = None


class SourceModel(Fbx4vrmModel):
    name: str | None = None
    asset_path: str | None = None
    source_format: str | None = None
    file_size_bytes: int = 0
    avatar_id: str | None = None
    is_new_avatar: bool = True
    # Version of the avatar package itself, not of the conversion tool.
    package_version: str | None = None
    vrm_meta: VrmMeta | None = None


class ConversionResult(Fbx4vrmModel):
    success: bool = False
    stopped_at_processor: str | None = None
    error_message: str | None = None
    duration_ms: int = 0
