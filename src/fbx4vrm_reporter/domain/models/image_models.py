from pydantic import Field

from fbx4vrm_reporter.domain.models.base_model import Fbx4vrmModel


class Screenshot(Fbx4vrmModel):
    """
    A single capture or a multi-angle set.

    Single captures use `base64`. Multi-angle captures keep `angles` and
    `base64_images` aligned index by index ("front", "back", ...).
    """

    format: str = "PNG"
    width: int = 0
    height: int = 0
    angles: list[str] = Field(default_factory=list)
    base64: str | None = None
    base64_images: list[str] = Field(default_factory=list)


class AdditionalImage(Fbx4vrmModel):
    """Image attached by the user, e.g. a reference picture or an error dialog."""

    filename: str | None = None
    format: str | None = None
    base64: str | None = None
    description: str | None = None
