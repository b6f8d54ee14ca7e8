# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response

from contactgrid.application.use_cases.contacts.add_contact import AddContactUseCase
from contactgrid.application.use_cases.contacts.search_contacts import SearchContactsUseCase
from contactgrid.application.use_cases.users.resolve_session import ResolveSessionUseCase
from contactgrid.infrastructure.audit import AuditAction, audit_log
from contactgrid.interfaces.http.contract import contract_endpoint, parse_body, render
from contactgrid.interfaces.http.dto.contacts import (
    AddContactRequestDTO,
    AddContactResponseDTO,
    SearchContactsRequestDTO,
    SearchContactsResponseDTO,
)
from contactgrid.interfaces.http.session import current_user_id, session_required
from contactgrid.shared.logging import logger


class ContactsController:
    def __init__(
        self,
        *,
        add_contact_use_case: AddContactUseCase,
        search_contacts_use_case: SearchContactsUseCase,
        resolve_session_use_case: ResolveSessionUseCase,
    ) -> None:
        self._add_contact = add_contact_use_case
        self._search_contacts = search_contacts_use_case
        self._resolve_session = resolve_session_use_case

    @contract_endpoint(AddContactResponseDTO.failure)
    @session_required
    def add_contact(self) -> tuple[Response, int]:
        dto = parse_body(AddContactRequestDTO)
        user_id = current_user_id()

        contact = self._add_contact.execute(user_id, dto.user_id, dto.contact)

        audit_log(
            AuditAction.CONTACT_ADDED,
            user_id=user_id,
            details={"contact_id": contact.id},
            success=True,
        )
        logger.info(f"contacts.add: ok (user_id={user_id}, contact_id={contact.id})")
        return render(AddContactResponseDTO())

    @contract_endpoint(SearchContactsResponseDTO.failure)
    @session_required
    def search_contacts(self) -> tuple[Response, int]:
        t0 = perf_counter()
        dto = parse_body(SearchContactsRequestDTO)
        user_id = current_user_id()

        names = self._search_contacts.execute(user_id, dto.user_id, dto.search)

        dt = (perf_counter() - t0) * 1000
        logger.info(f"contacts.search: ok (user_id={user_id}, n={len(names)}, dt_ms={dt:.0f})")
        return render(SearchContactsResponseDTO(results=names))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("contacts", __name__)
        bp.add_url_rule("/AddContact", view_func=self.add_contact, methods=["POST"])
        bp.add_url_rule("/SearchContacts", view_func=self.search_contacts, methods=["POST"])
        return bp
