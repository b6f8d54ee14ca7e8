# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Contact
from .repositories import ContactRepository

__all__ = ["Contact", "ContactRepository"]
