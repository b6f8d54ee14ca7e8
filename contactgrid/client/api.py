# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP client for the ContactGrid endpoints.

The client keeps the server's cookies in its jar and derives the login state
from them the same way a browser front-end would: the profile is usable only
when the auth cookie is present and ``userId``/``firstName``/``lastName`` all
parse.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from werkzeug.http import parse_cookie

from contactgrid.domain.sessions import SessionProfile, SessionState, read_session
from contactgrid.interfaces.http.dto.auth import AuthResponseDTO, LogoutResponseDTO
from contactgrid.interfaces.http.dto.contacts import (
    AddContactResponseDTO,
    SearchContactsResponseDTO,
)
from contactgrid.shared.logging import logger

ResponseT = TypeVar("ResponseT", bound=BaseModel)

DEFAULT_AUTH_COOKIE = "auth_token"


class ContactGridClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        *,
        auth_cookie: str = DEFAULT_AUTH_COOKIE,
    ) -> None:
        self._auth_cookie = auth_cookie
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> ContactGridClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        model: type[ResponseT],
        payload: dict[str, Any] | None = None,
    ) -> ResponseT:
        response = self._http.request(method, path, json=payload)
        response.raise_for_status()
        body = model.model_validate(response.json())
        error = getattr(body, "error", "")
        if error:
            logger.debug(f"client: {method} {path} error={error!r}")
        return body

    def register(
        self, first_name: str, last_name: str, login: str, password: str
    ) -> AuthResponseDTO:
        return self._request(
            "POST",
            "/Register",
            AuthResponseDTO,
            {
                "firstName": first_name,
                "lastName": last_name,
                "login": login,
                "password": password,
            },
        )

    def login(self, login: str, password: str) -> AuthResponseDTO:
        return self._request(
            "POST", "/Login", AuthResponseDTO, {"login": login, "password": password}
        )

    def add_contact(self, user_id: int, contact: str) -> AddContactResponseDTO:
        return self._request(
            "POST",
            "/AddContact",
            AddContactResponseDTO,
            {"contact": contact, "userId": user_id},
        )

    def search_contacts(self, user_id: int, search: str = "") -> SearchContactsResponseDTO:
        return self._request(
            "POST",
            "/SearchContacts",
            SearchContactsResponseDTO,
            {"search": search, "userId": user_id},
        )

    def resolve_session(self) -> AuthResponseDTO:
        return self._request("GET", "/Session", AuthResponseDTO)

    def logout(self) -> LogoutResponseDTO:
        try:
            return self._request("POST", "/Logout", LogoutResponseDTO, {})
        finally:
            self._http.cookies.clear()

    def _cookie_values(self) -> dict[str, str]:
        jar = self._http.cookies.jar
        jar.clear_expired_cookies()
        header = "; ".join(f"{c.name}={c.value}" for c in jar if c.value is not None)
        return dict(parse_cookie(header))

    @property
    def session(self) -> SessionProfile | None:
        cookies = self._cookie_values()
        if not cookies.get(self._auth_cookie):
            return None
        return read_session(cookies)

    @property
    def state(self) -> SessionState:
        if self.session is None:
            return SessionState.LOGGED_OUT
        return SessionState.LOGGED_IN


__all__ = ["ContactGridClient"]
