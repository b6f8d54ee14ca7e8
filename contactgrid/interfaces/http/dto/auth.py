from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contactgrid.domain.users.entities import User

from .base import RequestDTO


class RegisterRequestDTO(RequestDTO):
    first_name: str = Field(alias="firstName", min_length=1, max_length=50)
    last_name: str = Field(alias="lastName", min_length=1, max_length=50)
    login: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=100)

    @field_validator("first_name", "last_name", "login", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class LoginRequestDTO(RequestDTO):
    login: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=100)  # No strength check on login

    @field_validator("login", mode="before")
    @classmethod
    def _strip_login(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class AuthResponseDTO(BaseModel):
    """Body shared by Register, Login and Session; ``id == 0`` means no user."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    id: int = 0
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    error: str = ""

    @classmethod
    def success(cls, user: User) -> AuthResponseDTO:
        return cls(id=user.id, first_name=user.first_name, last_name=user.last_name)

    @classmethod
    def failure(cls, error: str) -> AuthResponseDTO:
        return cls(error=error)


class LogoutResponseDTO(BaseModel):
    error: str = ""

    @classmethod
    def failure(cls, error: str) -> LogoutResponseDTO:
        return cls(error=error)
