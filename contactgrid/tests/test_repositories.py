from __future__ import annotations

from contextlib import contextmanager
from datetime import UTC, datetime, timedelta

import pytest
from loguru import logger as loguru_logger
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from contactgrid.domain.contacts.entities import Contact
from contactgrid.domain.users.entities import User
from contactgrid.domain.users.exceptions import RegistrationFailedError, UserAlreadyExistsError
from contactgrid.infrastructure.db import SessionLocal
from contactgrid.infrastructure.repositories import (
    SqlAlchemyContactRepository,
    SqlAlchemySessionTokenRepository,
    SqlAlchemyUserRepository,
)
from contactgrid.infrastructure.repositories.users import sqlalchemy_user_repository as user_repository_module
from contactgrid.shared.errors import InfrastructureError

pytestmark = pytest.mark.usefixtures("reset_database")


def _new_user(login: str = "neo") -> User:
    return User(
        id=0,
        first_name="Thomas",
        last_name="Anderson",
        login=login,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def test_user_repository_round_trip() -> None:
    repo = SqlAlchemyUserRepository()

    stored = repo.add(_new_user())

    assert stored.id > 0
    assert repo.find_by_login("neo") == stored
    assert repo.find_by_id(stored.id) == stored
    assert repo.find_by_login("Neo") is None
    assert repo.find_by_id(stored.id + 1) is None


def test_user_repository_maps_unique_violation() -> None:
    repo = SqlAlchemyUserRepository()
    repo.add(_new_user())

    with pytest.raises(UserAlreadyExistsError):
        repo.add(_new_user())


def test_token_repository_replaces_previous_token() -> None:
    user = SqlAlchemyUserRepository().add(_new_user())
    tokens = SqlAlchemySessionTokenRepository(timedelta(minutes=20))

    first = tokens.replace_for_user(user.id)
    second = tokens.replace_for_user(user.id)

    assert tokens.find_active(first.token) is None
    active = tokens.find_active(second.token)
    assert active is not None
    assert active.user_id == user.id
    assert not active.is_expired()


def test_token_repository_ignores_expired_tokens() -> None:
    user = SqlAlchemyUserRepository().add(_new_user())
    tokens = SqlAlchemySessionTokenRepository(timedelta(minutes=-1))

    token = tokens.replace_for_user(user.id)

    assert tokens.find_active(token.token) is None


def test_token_repository_revoke() -> None:
    user = SqlAlchemyUserRepository().add(_new_user())
    tokens = SqlAlchemySessionTokenRepository(timedelta(minutes=20))
    token = tokens.replace_for_user(user.id)

    tokens.revoke(token.token)
    tokens.revoke("never-issued")

    assert tokens.find_active(token.token) is None


def test_contact_search_is_scoped_and_case_insensitive() -> None:
    users = SqlAlchemyUserRepository()
    neo = users.add(_new_user())
    smith = users.add(_new_user("smith"))
    repo = SqlAlchemyContactRepository(SessionLocal)
    for name in ("Morpheus", "ALICE", "Sally"):
        repo.add(Contact(id=0, user_id=neo.id, name=name))
    repo.add(Contact(id=0, user_id=smith.id, name="Albert"))

    assert [c.name for c in repo.search(neo.id, "")] == ["Morpheus", "ALICE", "Sally"]
    assert [c.name for c in repo.search(neo.id, "al")] == ["ALICE", "Sally"]
    assert [c.name for c in repo.search(smith.id, "al")] == ["Albert"]


def test_contact_search_escapes_wildcards() -> None:
    neo = SqlAlchemyUserRepository().add(_new_user())
    repo = SqlAlchemyContactRepository(SessionLocal)
    repo.add(Contact(id=0, user_id=neo.id, name="100% Real"))
    repo.add(Contact(id=0, user_id=neo.id, name="Agent_Smith"))
    repo.add(Contact(id=0, user_id=neo.id, name="Agent Brown"))

    assert [c.name for c in repo.search(neo.id, "%")] == ["100% Real"]
    assert [c.name for c in repo.search(neo.id, "_")] == ["Agent_Smith"]


def test_contact_add_returns_assigned_id() -> None:
    neo = SqlAlchemyUserRepository().add(_new_user())
    repo = SqlAlchemyContactRepository(SessionLocal)

    first = repo.add(Contact(id=0, user_id=neo.id, name="Trinity"))
    second = repo.add(Contact(id=0, user_id=neo.id, name="Trinity"))

    assert 0 < first.id < second.id


def test_user_repository_remove() -> None:
    repo = SqlAlchemyUserRepository()
    stored = repo.add(_new_user())

    repo.remove(stored.id)
    repo.remove(stored.id)

    assert repo.find_by_id(stored.id) is None
    assert repo.add(_new_user()).id > 0


def _failing_scope(error: SQLAlchemyError):
    @contextmanager
    def scope():
        raise error
        yield

    return scope


@pytest.mark.parametrize(
    ("error", "expected", "message"),
    [
        (
            OperationalError("INSERT INTO users", {}, Exception("database is locked at /srv/grid.db")),
            InfrastructureError,
            "Neural grid unavailable, try again later",
        ),
        (
            SQLAlchemyError("constraint check failed at /srv/grid.db"),
            RegistrationFailedError,
            "Failed to create neural link",
        ),
    ],
)
def test_user_repository_add_maps_store_errors(monkeypatch, error, expected, message) -> None:
    monkeypatch.setattr(user_repository_module, "session_scope", _failing_scope(error))

    with pytest.raises(expected) as exc_info:
        SqlAlchemyUserRepository().add(_new_user())

    assert exc_info.value.describe() == message
    assert "/srv" not in exc_info.value.describe()


def _unreachable_session():
    raise OperationalError("SELECT 1", {}, Exception("disk I/O error in /srv/grid.db"))


def test_contact_repository_maps_store_errors() -> None:
    repo = SqlAlchemyContactRepository(_unreachable_session)

    with pytest.raises(InfrastructureError) as added:
        repo.add(Contact(id=0, user_id=1, name="Trinity"))
    with pytest.raises(InfrastructureError) as searched:
        repo.search(1, "")

    assert added.value.describe() == "Failed to add contact"
    assert searched.value.describe() == "Failed to scan neural grid"
    assert "disk I/O" not in added.value.describe() + searched.value.describe()


def test_token_repository_keeps_token_out_of_logs() -> None:
    user = SqlAlchemyUserRepository().add(_new_user())
    messages: list[str] = []
    sink_id = loguru_logger.add(messages.append, format="{message}", level="DEBUG")
    try:
        token = SqlAlchemySessionTokenRepository(timedelta(minutes=20)).replace_for_user(user.id)
    finally:
        loguru_logger.remove(sink_id)

    assert any(f"user={user.id}" in line for line in messages)
    assert not any(token.token[:8] in line for line in messages)
