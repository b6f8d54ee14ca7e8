# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Response, g, request

from contactgrid.domain.sessions import PROFILE_COOKIES, SessionProfile
from contactgrid.domain.users.entities import SessionToken, User
from contactgrid.shared.config import load_config
from contactgrid.shared.logging import logger

AUTH_TOKEN_HEADER = "X-Auth-Token"


def extract_session_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return request.cookies.get(load_config().session.cookie_name, "")


def current_user_id() -> int:
    return int(g.user_id)


def session_required(f: Callable):
    """Resolve the session token through ``self._resolve_session`` before the view runs."""

    @wraps(f)
    def inner(self, *a, **kw):
        user = self._resolve_session.execute(extract_session_token())
        g.user_id = user.id
        logger.debug(f"Session OK: user={user.id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner


def issue_session_cookies(response: Response, user: User, token: SessionToken) -> None:
    config = load_config()
    max_age = config.session.lifetime_seconds
    response.headers[AUTH_TOKEN_HEADER] = token.token
    response.set_cookie(
        config.session.cookie_name,
        token.token,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.security.cookie_secure,
    )
    profile = SessionProfile(user_id=user.id, first_name=user.first_name, last_name=user.last_name)
    for name, value in profile.as_cookies().items():
        response.set_cookie(
            name,
            value,
            max_age=max_age,
            path="/",
            samesite=config.security.cookie_samesite,
            secure=config.security.cookie_secure,
        )


def clear_session_cookies(response: Response) -> None:
    config = load_config()
    for name in (config.session.cookie_name, *PROFILE_COOKIES):
        response.delete_cookie(
            name,
            path="/",
            samesite=config.security.cookie_samesite,
            secure=config.security.cookie_secure,
        )


__all__ = [
    "AUTH_TOKEN_HEADER",
    "clear_session_cookies",
    "current_user_id",
    "extract_session_token",
    "issue_session_cookies",
    "session_required",
]
