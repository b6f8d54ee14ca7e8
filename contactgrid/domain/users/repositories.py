# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionToken, User


class UserRepository(Protocol):
    def find_by_login(self, login: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...

    def add(self, user: User) -> User:
        """Persist ``user``; raises ``UserAlreadyExistsError`` when the login is taken."""
        ...

    def remove(self, user_id: int) -> None: ...


class SessionTokenRepository(Protocol):
    def replace_for_user(self, user_id: int) -> SessionToken: ...
    def find_active(self, token: str) -> SessionToken | None: ...
    def revoke(self, token: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
