"""Diagnostics collected while converting a model: skeleton, meshes, materials, expressions, dynamics."""

from pydantic import Field

from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel


# Skeleton

class BoneInfo(Fbx4vrmModel):
    found: int = 0
    missing: list[str] = Field(default_factory=list)


class ArmatureRotation(Fbx4vrmModel):
    euler: list[float] = Field(default_factory=list)
    requires_normalization: bool = False
    normalized: bool = False


class BoneOrientationIssue(Fbx4vrmModel):
    bone: str | None = None
    expected_forward: list[float] = Field(default_factory=list)
    actual_forward: list[float] = Field(default_factory=list)
    angle_diff_deg: float = 0.0


class BoneOrientations(Fbx4vrmModel):
    issues: list[BoneOrientationIssue] = Field(default_factory=list)


class Skeleton(Fbx4vrmModel):
    avatar_name: str | None = None
    is_humanoid: bool = False
    required_bones: BoneInfo | None = None
    recommended_bones: BoneInfo | None = None
    bone_hierarchy_valid: bool = False
    t_pose_valid: bool = False
    armature_rotation: ArmatureRotation | None = None
    bone_orientations: BoneOrientations | None = None
    total_bones: int = 0


# Meshes

class MeshInfo(Fbx4vrmModel):
    name: str | None = None
    vertices: int = 0
    triangles: int = 0
    blendshapes: int = 0
    submeshes: int = 0
    material_slots: int = 0


class Meshes(Fbx4vrmModel):
    skinned_mesh_count: int = 0
    mesh_filter_count: int = 0
    total_vertices: int = 0
    total_triangles: int = 0
    blendshape_count: int = 0
    meshes: list[MeshInfo] = Field(default_factory=list)


# Materials

class ShaderCount(Fbx4vrmModel):
    shader_name: str | None = None
    count: int = 0


class MaterialWarning(Fbx4vrmModel):
    type: str | None = None
    property: str | None = None
    original_value: str | None = None
    clamped_value: str | None = None


class MaterialConversionResult(Fbx4vrmModel):
    name: str | None = None
    original_shader: str | None = None
    target_shader: str | None = None
    success: bool = False
    error: str | None = None
    warnings: list[MaterialWarning] = Field(default_factory=list)


class UnsupportedShader(Fbx4vrmModel):
    name: str | None = None
    shader: str | None = None
    reason: str | None = None


class Materials(Fbx4vrmModel):
    total_count: int = 0
    original_shaders_list: list[ShaderCount] = Field(default_factory=list)
    conversion_results: list[MaterialConversionResult] = Field(default_factory=list)
    unsupported_shaders: list[UnsupportedShader] = Field(default_factory=list)


# Expressions

class ExpressionMapping(Fbx4vrmModel):
    vrm_expression: str | None = None
    source: str | None = None
    mesh: str | None = None


class ExpressionConflict(Fbx4vrmModel):
    vrm_expression: str | None = None
    candidates: list[str] = Field(default_factory=list)
    selected: str | None = None
    reason: str | None = None


class Expressions(Fbx4vrmModel):
    total_blendshapes: int = 0
    mapped_count: int = 0
    unmapped_count: int = 0
    mappings: list[ExpressionMapping] = Field(default_factory=list)
    conflicts: list[ExpressionConflict] = Field(default_factory=list)
    missing_recommended: list[str] = Field(default_factory=list)


# Dynamics

class DynamicsConversionResult(Fbx4vrmModel):
    name: str | None = None
    source_type: str | None = None
    success: bool = False
    error: str | None = None


class Dynamics(Fbx4vrmModel):
    source_type: str | None = None
    vrm_springbone_count: int = 0
    vrchat_physbone_count: int = 0
    dynamicbone_count: int = 0
    collider_count: int = 0
    conversion_results: list[DynamicsConversionResult] = Field(default_factory=list)
