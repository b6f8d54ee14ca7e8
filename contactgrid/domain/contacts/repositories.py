# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Contact


class ContactRepository(Protocol):
    def add(self, contact: Contact) -> Contact: ...

    def search(self, user_id: int, term: str) -> Sequence[Contact]:
        """Contacts of ``user_id`` whose name contains ``term``, oldest first."""
        ...
