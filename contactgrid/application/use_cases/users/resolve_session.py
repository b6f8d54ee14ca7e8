# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case turning an opaque session token back into its user."""

from __future__ import annotations

from contactgrid.domain.users.entities import User
from contactgrid.domain.users.exceptions import SessionExpiredError, SessionUserMismatchError
from contactgrid.domain.users.repositories import SessionTokenRepository, UserRepository


class ResolveSessionUseCase:
    def __init__(self, *, users: UserRepository, tokens: SessionTokenRepository) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> User:
        if not token:
            raise SessionExpiredError()
        session = self._tokens.find_active(token)
        if session is None or session.is_expired():
            raise SessionExpiredError()
        user = self._users.find_by_id(session.user_id)
        if user is None:
            self._tokens.revoke(token)
            raise SessionExpiredError()
        return user


def ensure_same_user(session_user_id: int, requested_user_id: int) -> None:
    if session_user_id != requested_user_id:
        raise SessionUserMismatchError(context={"userId": requested_user_id})
