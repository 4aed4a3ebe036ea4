import os
import sys

import pytest

# Keep the test run off the on-disk database.
os.environ.setdefault("MOSAICO_DATABASE_URL", "sqlite://")

# Ensure the project root (containing the `mosaico` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from mosaico.app import app
from mosaico.core import get_session
from mosaico.services.store import RankingStore


@pytest.fixture()
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import mosaico.models  # noqa: F401
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture()
def store(session):
    return RankingStore(session)


@pytest.fixture()
def client(engine):
    def _get_test_session():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _get_test_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

