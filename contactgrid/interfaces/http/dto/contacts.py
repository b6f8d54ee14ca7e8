from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import RequestDTO


class AddContactRequestDTO(RequestDTO):
    contact: str = Field(min_length=1, max_length=255)
    user_id: int = Field(alias="userId", ge=1, strict=True)

    model_config = ConfigDict(**RequestDTO.model_config, str_strip_whitespace=True)


class SearchContactsRequestDTO(RequestDTO):
    search: str = Field(max_length=255)
    user_id: int = Field(alias="userId", ge=1, strict=True)


class AddContactResponseDTO(BaseModel):
    error: str = ""

    @classmethod
    def failure(cls, error: str) -> AddContactResponseDTO:
        return cls(error=error)


class SearchContactsResponseDTO(BaseModel):
    results: list[str] = Field(default_factory=list)
    error: str = ""

    @classmethod
    def failure(cls, error: str) -> SearchContactsResponseDTO:
        return cls(error=error)
