from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Fbx4vrmModel(BaseModel):
    """
    Base record for every payload exchanged with the FBX4VRM server.
    Records are immutable; unknown fields sent by the server are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # A null for a field with a non-null default (0, False, []) reads as that default
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required() or (field.default is None and field.default_factory is None):
            return value
        return field.get_default(call_default_factory=True)
