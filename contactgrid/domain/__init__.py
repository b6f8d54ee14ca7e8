# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .contacts.entities import Contact
from .exceptions import InvariantViolation, InvariantViolationError
from .sessions import SessionProfile, SessionState, read_session, session_state
from .users.entities import SessionToken, User

__all__ = [
    "Contact",
    "InvariantViolation",
    "InvariantViolationError",
    "SessionProfile",
    "SessionState",
    "SessionToken",
    "User",
    "read_session",
    "session_state",
]
