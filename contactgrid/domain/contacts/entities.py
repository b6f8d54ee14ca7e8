# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from contactgrid.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Contact:
    """Free-text contact name owned by a single user."""

    id: int
    user_id: int
    name: str

    def __post_init__(self) -> None:
        if self.user_id <= 0:
            raise InvariantViolation("owner id must be positive", field="userId")
        if not self.name.strip():
            raise InvariantViolation("contact name cannot be empty", field="contact")
