# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from contactgrid.application.use_cases.users.resolve_session import ensure_same_user
from contactgrid.domain.contacts.entities import Contact
from contactgrid.domain.contacts.repositories import ContactRepository


class AddContactUseCase:
    def __init__(self, *, contacts: ContactRepository) -> None:
        self._contacts = contacts

    def execute(self, session_user_id: int, user_id: int, name: str) -> Contact:
        ensure_same_user(session_user_id, user_id)
        contact = Contact(id=0, user_id=user_id, name=name.strip())
        return self._contacts.add(contact)
