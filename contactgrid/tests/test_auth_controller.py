from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from contactgrid.application.use_cases.users.register_user import RegisterUserUseCase
from contactgrid.application.use_cases.users.resolve_session import ResolveSessionUseCase
from contactgrid.domain.users.entities import SessionToken, User
from contactgrid.domain.users.exceptions import (
    InvalidCredentialsError,
    SessionExpiredError,
    UserAlreadyExistsError,
)
from contactgrid.interfaces.http.controllers import auth_controller, contacts_controller
from contactgrid.interfaces.http.controllers.auth_controller import AuthController
from contactgrid.interfaces.http.controllers.contacts_controller import ContactsController
from contactgrid.shared.middleware.error_handler import configure_error_handling


def _user(user_id: int = 1) -> User:
    return User(
        id=user_id,
        first_name="Thomas",
        last_name="Anderson",
        login="neo",
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def _token(user_id: int = 1) -> SessionToken:
    return SessionToken(
        user_id=user_id, token="token123", expires_at=datetime.now(UTC) + timedelta(minutes=20)
    )


@pytest.fixture(autouse=True)
def audit_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    calls: list[tuple] = []

    def fake_audit(action, *args, **kwargs):
        calls.append((action, kwargs))

    monkeypatch.setattr(auth_controller, "audit_log", fake_audit)
    monkeypatch.setattr(contacts_controller, "audit_log", fake_audit)
    return calls


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _auth_controller(**overrides) -> AuthController:
    kwargs = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "resolve_session_use_case": MagicMock(),
    }
    kwargs.update(overrides)
    return AuthController(**kwargs)


def test_register_endpoint_sets_cookies(flask_app: Flask, audit_calls: list[tuple]) -> None:
    register_called: dict[str, tuple[str, ...]] = {}

    class StubRegister:
        def execute(self, first_name, last_name, login, password):
            register_called["args"] = (first_name, last_name, login, password)
            return _user(), _token()

    controller = _auth_controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/Register",
            json={
                "firstName": " Thomas ",
                "lastName": "Anderson",
                "login": "neo",
                "password": "redpill1",
            },
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "id": 1,
        "firstName": "Thomas",
        "lastName": "Anderson",
        "error": "",
    }
    assert register_called["args"] == ("Thomas", "Anderson", "neo", "redpill1")
    cookies = response.headers.getlist("Set-Cookie")
    assert any(c.startswith("auth_token=token123") and "HttpOnly" in c for c in cookies)
    assert any(c.startswith("userId=1;") for c in cookies)
    assert any(c.startswith("firstName=Thomas;") for c in cookies)
    assert response.headers["X-Auth-Token"] == "token123"
    assert any(c.startswith("lastName=Anderson;") for c in cookies)
    assert audit_calls[0][0].value == "register"


def test_register_duplicate_returns_shaped_error(
    flask_app: Flask, audit_calls: list[tuple]
) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    flask_app.register_blueprint(_auth_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/Register",
            json={"firstName": "A", "lastName": "B", "login": "neo", "password": "redpill1"},
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "id": 0,
        "firstName": "",
        "lastName": "",
        "error": "Neural ID already exists in the grid",
    }
    assert "Set-Cookie" not in response.headers
    assert "X-Auth-Token" not in response.headers
    assert audit_calls[0][0].value == "register_failed"


def test_register_invalid_payload_skips_use_case(flask_app: Flask) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_auth_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/Register",
            json={"firstName": "A", "lastName": "B", "login": "ab", "password": "redpill1"},
        )

    payload = response.get_json()
    assert response.status_code == 200
    assert payload["id"] == 0
    assert payload["error"].startswith("login: ")
    register.execute.assert_not_called()


def test_login_rejects_non_json_body(flask_app: Flask) -> None:
    login = MagicMock()
    flask_app.register_blueprint(_auth_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/Login", data="not json", content_type="text/plain")

    assert response.status_code == 200
    assert response.get_json()["error"] == "Request body must be a JSON object"
    login.execute.assert_not_called()


def test_login_invalid_credentials(flask_app: Flask, audit_calls: list[tuple]) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_auth_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/Login", json={"login": "neo", "password": "bluepill"})

    assert response.get_json() == {
        "id": 0,
        "firstName": "",
        "lastName": "",
        "error": "Invalid neural ID or access code",
    }
    assert audit_calls[0][1]["success"] is False


def test_logout_expires_all_cookies(flask_app: Flask) -> None:
    logout = MagicMock()
    flask_app.register_blueprint(_auth_controller(logout_use_case=logout).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/Logout", headers={"Authorization": "Bearer token123"})

    assert response.get_json() == {"error": ""}
    logout.execute.assert_called_once_with("token123")
    cookies = response.headers.getlist("Set-Cookie")
    for name in ("auth_token", "userId", "firstName", "lastName"):
        assert any(c.startswith(f"{name}=;") and "Max-Age=0" in c for c in cookies)


def test_session_without_token(flask_app: Flask) -> None:
    resolve = MagicMock()
    resolve.execute.side_effect = SessionExpiredError()
    flask_app.register_blueprint(_auth_controller(resolve_session_use_case=resolve).as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/Session")

    assert response.status_code == 200
    assert response.get_json()["error"] == "Neural link expired, please log in again"
    resolve.execute.assert_called_once_with("")


def _contacts_app(flask_app: Flask, add=None, search=None, user_id: int = 5) -> Flask:
    resolve = MagicMock()
    resolve.execute.return_value = _user(user_id)
    controller = ContactsController(
        add_contact_use_case=add or MagicMock(),
        search_contacts_use_case=search or MagicMock(),
        resolve_session_use_case=cast(ResolveSessionUseCase, resolve),
    )
    flask_app.register_blueprint(controller.as_blueprint())
    return flask_app


def test_add_contact_passes_session_user(flask_app: Flask, audit_calls: list[tuple]) -> None:
    add = MagicMock()
    add.execute.return_value = MagicMock(id=9)
    app = _contacts_app(flask_app, add=add)

    with app.test_client() as client:
        response = client.post(
            "/AddContact",
            json={"contact": " Trinity ", "userId": 5},
            headers={"Authorization": "Bearer token123"},
        )

    assert response.get_json() == {"error": ""}
    add.execute.assert_called_once_with(5, 5, "Trinity")
    assert audit_calls[0][0].value == "contact_added"


def test_add_contact_requires_integer_user_id(flask_app: Flask) -> None:
    add = MagicMock()
    app = _contacts_app(flask_app, add=add)

    with app.test_client() as client:
        response = client.post(
            "/AddContact",
            json={"contact": "Trinity", "userId": "5"},
            headers={"Authorization": "Bearer token123"},
        )

    assert response.get_json()["error"].startswith("userId: ")
    add.execute.assert_not_called()


def test_search_contacts_returns_results(flask_app: Flask) -> None:
    search = MagicMock()
    search.execute.return_value = ["Alice", "Sally"]
    app = _contacts_app(flask_app, search=search)

    with app.test_client() as client:
        response = client.post(
            "/SearchContacts",
            json={"search": "al", "userId": 5},
            headers={"Authorization": "Bearer token123"},
        )

    assert response.get_json() == {"results": ["Alice", "Sally"], "error": ""}
    search.execute.assert_called_once_with(5, 5, "al")


def test_search_contacts_without_session(flask_app: Flask) -> None:
    search = MagicMock()
    resolve = MagicMock()
    resolve.execute.side_effect = SessionExpiredError()
    controller = ContactsController(
        add_contact_use_case=MagicMock(),
        search_contacts_use_case=search,
        resolve_session_use_case=resolve,
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/SearchContacts", json={"search": "", "userId": 5})

    assert response.get_json() == {
        "results": [],
        "error": "Neural link expired, please log in again",
    }
    search.execute.assert_not_called()
