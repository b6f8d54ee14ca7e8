"""Use-case for revoking session tokens."""

from __future__ import annotations

from contactgrid.domain.users.repositories import SessionTokenRepository
from contactgrid.shared.errors import InfrastructureError
from contactgrid.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, tokens: SessionTokenRepository) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> None:
        if not token:
            return
        try:
            self._tokens.revoke(token)
        except InfrastructureError as exc:
            # Logout always completes; the row expires on its own.
            logger.warning(f"logout: token revoke failed code={exc.code}")
