# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from contactgrid.shared.errors.base import DomainError


class InvariantViolationError(DomainError):
    code = "invariant_violation"
    status = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(self, message: str, *, field: str | None = None):
        text = f"{field}: {message}" if field else message
        super().__init__(
            context={"field": field} if field else None,
            message=text,
        )
        self.field = field

    def __str__(self) -> str:
        return self.describe()


InvariantViolation = InvariantViolationError
