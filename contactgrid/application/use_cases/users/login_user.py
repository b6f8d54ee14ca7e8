# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from contactgrid.domain.users.entities import SessionToken, User
from contactgrid.domain.users.exceptions import InvalidCredentialsError
from contactgrid.domain.users.repositories import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)


class LoginUserUseCase:
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

    @cached_property
    def _decoy_hash(self) -> str:
        # Unknown logins are verified against this so both failure paths cost the same.
        return self._password_hasher.hash("contactgrid-decoy")

    def execute(self, login: str, password: str) -> tuple[User, SessionToken]:
        user = self._users.find_by_login(login)
        if user is None:
            self._password_hasher.verify(password, self._decoy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.replace_for_user(user.id)
        return user, token
