# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from contactgrid.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "Neural ID already exists in the grid"


class RegistrationFailedError(DomainError):
    code = "registration_failed"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Failed to create neural link"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid neural ID or access code"


class SessionExpiredError(DomainError):
    code = "session_expired"
    status = HTTPStatus.UNAUTHORIZED
    message = "Neural link expired, please log in again"


class SessionUserMismatchError(DomainError):
    code = "session_user_mismatch"
    status = HTTPStatus.FORBIDDEN
    message = "Access denied for this neural ID"
