# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from contactgrid.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:
    """Registered account; ``id`` is 0 until the store assigns one."""

    id: int
    first_name: str
    last_name: str
    login: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if self.id < 0:
            raise InvariantViolation("user id cannot be negative", field="id")
        if not self.login:
            raise InvariantViolation("login cannot be empty", field="login")


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        moment = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= moment
