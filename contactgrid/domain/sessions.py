# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-visible session profile and the rule that derives it from cookies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

USER_ID_COOKIE = "userId"
FIRST_NAME_COOKIE = "firstName"
LAST_NAME_COOKIE = "lastName"

PROFILE_COOKIES: tuple[str, ...] = (FIRST_NAME_COOKIE, LAST_NAME_COOKIE, USER_ID_COOKIE)


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


@dataclass(slots=True, frozen=True)
class SessionProfile:
    user_id: int
    first_name: str
    last_name: str

    def as_cookies(self) -> dict[str, str]:
        return {
            FIRST_NAME_COOKIE: self.first_name,
            LAST_NAME_COOKIE: self.last_name,
            USER_ID_COOKIE: str(self.user_id),
        }


def _parse_user_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def read_session(cookies: Mapping[str, str]) -> SessionProfile | None:
    """Return the profile only when every field is present and usable.

    A missing or empty name, or a ``userId`` that is not a positive integer,
    invalidates the whole session.
    """

    user_id = _parse_user_id(cookies.get(USER_ID_COOKIE))
    first_name = cookies.get(FIRST_NAME_COOKIE) or ""
    last_name = cookies.get(LAST_NAME_COOKIE) or ""
    if user_id is None or not first_name or not last_name:
        return None
    return SessionProfile(user_id=user_id, first_name=first_name, last_name=last_name)


def session_state(cookies: Mapping[str, str]) -> SessionState:
    if read_session(cookies) is None:
        return SessionState.LOGGED_OUT
    return SessionState.LOGGED_IN


__all__ = [
    "FIRST_NAME_COOKIE",
    "LAST_NAME_COOKIE",
    "PROFILE_COOKIES",
    "USER_ID_COOKIE",
    "SessionProfile",
    "SessionState",
    "read_session",
    "session_state",
]
