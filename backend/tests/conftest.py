import os

os.environ["ENVIRONMENT"] = "testing"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlmodel import Session  # noqa: E402

from app.api.deps import get_db  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.main import app  # noqa: E402

from .fixtures.factories import *  # noqa: E402, F403
from .utils.db import create_sqlite_engine, run_migrations  # noqa: E402

TEST_DATABASE_URL = settings.SQLALCHEMY_DATABASE_URI_TEST


@pytest.fixture(scope="session", autouse=True)
def create_test_database() -> Generator[Engine, None, None]:
    assert settings.ENVIRONMENT == "testing"

    engine = create_sqlite_engine(TEST_DATABASE_URL)
    run_migrations(engine, "head")

    yield engine

    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(create_test_database: Engine) -> Generator[Session, None, None]:
    connection = create_test_database.connect()
    transaction = connection.begin()

    # Commits and rollbacks inside the test only touch a savepoint
    session = Session(bind=connection, join_transaction_mode="create_savepoint")

    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    transaction.rollback()
    connection.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
