# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from contactgrid.application.use_cases.users.resolve_session import ensure_same_user
from contactgrid.domain.contacts.repositories import ContactRepository


class SearchContactsUseCase:
    """List a user's contact names; an empty term returns all of them."""

    def __init__(self, *, contacts: ContactRepository) -> None:
        self._contacts = contacts

    def execute(self, session_user_id: int, user_id: int, term: str) -> list[str]:
        ensure_same_user(session_user_id, user_id)
        found = self._contacts.search(user_id, term.strip())
        return [contact.name for contact in found]
