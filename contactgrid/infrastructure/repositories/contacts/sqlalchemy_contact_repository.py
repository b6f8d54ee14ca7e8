# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contactgrid.domain.contacts.entities import Contact as DomainContact
from contactgrid.domain.contacts.repositories import ContactRepository
from contactgrid.infrastructure.db.models import Contact
from contactgrid.infrastructure.unit_of_work import unit_of_work_scope
from contactgrid.shared.errors import InfrastructureError
from contactgrid.shared.logging import logger


class SqlAlchemyContactRepository(ContactRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, contact: DomainContact) -> DomainContact:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Contact(user_id=contact.user_id, name=contact.name)
                session.add(row)
                session.flush()
                contact_id = row.id
        except SQLAlchemyError as exc:
            logger.exception(f"contacts.add: insert failed (user_id={contact.user_id})")
            raise InfrastructureError(
                code="contact_add_failed", message="Failed to add contact"
            ) from exc
        return DomainContact(id=contact_id, user_id=contact.user_id, name=contact.name)

    def search(self, user_id: int, term: str) -> Sequence[DomainContact]:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                query = session.query(Contact).filter(Contact.user_id == user_id)
                if term:
                    query = query.filter(Contact.name.icontains(term, autoescape=True))
                rows = query.order_by(Contact.id.asc()).all()
        except SQLAlchemyError as exc:
            logger.exception(f"contacts.search: query failed (user_id={user_id})")
            raise InfrastructureError(
                code="contact_search_failed", message="Failed to scan neural grid"
            ) from exc
        return [DomainContact(id=row.id, user_id=row.user_id, name=row.name) for row in rows]
