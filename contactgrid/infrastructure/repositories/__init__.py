# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .contacts.sqlalchemy_contact_repository import SqlAlchemyContactRepository
from .users.sqlalchemy_user_repository import (
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)

__all__ = [
    "SqlAlchemyContactRepository",
    "SqlAlchemySessionTokenRepository",
    "SqlAlchemyUserRepository",
]
