from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RequestDTO(BaseModel):
    """Request bodies accept camelCase aliases or field names; unknown keys are dropped."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="ignore")


__all__ = ["RequestDTO"]
