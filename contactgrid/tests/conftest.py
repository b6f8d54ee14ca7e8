from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="contactgrid-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'contactgrid.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test"

import pytest  # noqa: E402


@pytest.fixture()
def reset_database():
    from contactgrid.infrastructure.db import ENGINE, Base, SessionLocal

    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=ENGINE)
