# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.contacts import AddContactUseCase, SearchContactsUseCase
from .use_cases.users import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    ResolveSessionUseCase,
)

__all__ = [
    "AddContactUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "ResolveSessionUseCase",
    "SearchContactsUseCase",
]
