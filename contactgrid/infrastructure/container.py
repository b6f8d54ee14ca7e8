# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from contactgrid.application.services.password_hashing import \
    WerkzeugPasswordHasher
from contactgrid.application.use_cases.contacts.add_contact import \
    AddContactUseCase
from contactgrid.application.use_cases.contacts.search_contacts import \
    SearchContactsUseCase
from contactgrid.application.use_cases.users.login_user import LoginUserUseCase
from contactgrid.application.use_cases.users.logout_user import LogoutUserUseCase
from contactgrid.application.use_cases.users.register_user import \
    RegisterUserUseCase
from contactgrid.application.use_cases.users.resolve_session import \
    ResolveSessionUseCase
from contactgrid.infrastructure.db import SessionLocal
from contactgrid.infrastructure.repositories.contacts.sqlalchemy_contact_repository import \
    SqlAlchemyContactRepository
from contactgrid.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository, SqlAlchemyUserRepository)
from contactgrid.interfaces.http.controllers.auth_controller import AuthController
from contactgrid.interfaces.http.controllers.contacts_controller import \
    ContactsController
from contactgrid.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_token_repository(self) -> SqlAlchemySessionTokenRepository:
        return SqlAlchemySessionTokenRepository(
            timedelta(minutes=self._config.session.lifetime_minutes)
        )

    @cached_property
    def contact_repository(self) -> SqlAlchemyContactRepository:
        return SqlAlchemyContactRepository(SessionLocal)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_repository)

    @cached_property
    def resolve_session_use_case(self) -> ResolveSessionUseCase:
        return ResolveSessionUseCase(
            users=self.user_repository,
            tokens=self.session_token_repository,
        )

    @cached_property
    def add_contact_use_case(self) -> AddContactUseCase:
        return AddContactUseCase(contacts=self.contact_repository)

    @cached_property
    def search_contacts_use_case(self) -> SearchContactsUseCase:
        return SearchContactsUseCase(contacts=self.contact_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            resolve_session_use_case=self.resolve_session_use_case,
        )

    @cached_property
    def contacts_controller(self) -> ContactsController:
        return ContactsController(
            add_contact_use_case=self.add_contact_use_case,
            search_contacts_use_case=self.search_contacts_use_case,
            resolve_session_use_case=self.resolve_session_use_case,
        )


container = Container()
