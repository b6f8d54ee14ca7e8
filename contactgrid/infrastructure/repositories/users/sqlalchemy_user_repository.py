# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from contactgrid.domain.users.entities import SessionToken as DomainSessionToken
from contactgrid.domain.users.entities import User as DomainUser
from contactgrid.domain.users.exceptions import RegistrationFailedError, UserAlreadyExistsError
from contactgrid.domain.users.repositories import SessionTokenRepository, UserRepository
from contactgrid.infrastructure.db.models import SessionToken, User
from contactgrid.infrastructure.db.session import session_scope
from contactgrid.shared.errors import InfrastructureError
from contactgrid.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at or datetime.now(UTC)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        login=row.login,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_login(self, login: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.query(User).filter(User.login == login).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception("users.find_by_login: store error")
            raise InfrastructureError(code="users_store_unavailable") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.get(User, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"users.find_by_id: store error (user_id={user_id})")
            raise InfrastructureError(code="users_store_unavailable") from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    login=user.login,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"users.add: login already taken (login={user.login})")
            raise UserAlreadyExistsError() from exc
        except OperationalError as exc:
            logger.exception("users.add: store unavailable")
            raise InfrastructureError(code="users_store_unavailable") from exc
        except SQLAlchemyError as exc:
            logger.exception(f"users.add: insert failed (login={user.login})")
            raise RegistrationFailedError() from exc

    def remove(self, user_id: int) -> None:
        try:
            with session_scope() as session:
                session.query(User).filter(User.id == user_id).delete()
        except SQLAlchemyError as exc:
            logger.exception(f"users.remove: delete failed (user_id={user_id})")
            raise InfrastructureError(code="users_store_unavailable") from exc


class SqlAlchemySessionTokenRepository(SessionTokenRepository):
    def __init__(self, lifetime: timedelta) -> None:
        self._lifetime = lifetime

    def replace_for_user(self, user_id: int) -> DomainSessionToken:
        try:
            with session_scope() as session:
                session.query(SessionToken).filter(SessionToken.user_id == user_id).delete()
                token_value = secrets.token_urlsafe(48)
                expires_at = datetime.now(UTC) + self._lifetime
                row = SessionToken(user_id=user_id, token=token_value, expires_at=expires_at)
                session.add(row)
        except SQLAlchemyError as exc:
            logger.exception(f"sessions.issue: store error (user_id={user_id})")
            raise InfrastructureError(code="session_store_unavailable") from exc

        logger.info(f"Issued token for user={user_id} exp={expires_at.isoformat()}")
        return DomainSessionToken(user_id=user_id, token=token_value, expires_at=expires_at)

    def find_active(self, token: str) -> DomainSessionToken | None:
        try:
            with session_scope() as session:
                row = (
                    session.query(SessionToken)
                    .filter(
                        SessionToken.token == token,
                        SessionToken.expires_at > datetime.now(UTC),
                    )
                    .first()
                )
                if not row:
                    return None
                expires_at = row.expires_at
                if expires_at.tzinfo is None:
                    expires_at = expires_at.replace(tzinfo=UTC)
                return DomainSessionToken(
                    user_id=row.user_id, token=row.token, expires_at=expires_at
                )
        except SQLAlchemyError as exc:
            logger.exception("sessions.lookup: store error")
            raise InfrastructureError(code="session_store_unavailable") from exc

    def revoke(self, token: str) -> None:
        try:
            with session_scope() as session:
                session.query(SessionToken).filter(SessionToken.token == token).delete()
        except SQLAlchemyError as exc:
            logger.exception("sessions.revoke: store error")
            raise InfrastructureError(code="session_store_unavailable") from exc
