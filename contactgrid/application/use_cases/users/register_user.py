# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from contactgrid.domain.users.entities import SessionToken, User
from contactgrid.domain.users.repositories import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)
from contactgrid.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(
        self, first_name: str, last_name: str, login: str, password: str
    ) -> tuple[User, SessionToken]:
        # Uniqueness of the login is enforced by the store on insert.
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            first_name=first_name,
            last_name=last_name,
            login=login,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        try:
            token = self._tokens.replace_for_user(persisted.id)
        except Exception:
            # A failed registration leaves no user row behind.
            logger.warning(f"register: token issue failed, removing user_id={persisted.id}")
            self._users.remove(persisted.id)
            raise
        return persisted, token
