import os

# keep the application's own engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session

from event_roster.database.db import Base, get_db, make_engine
from event_roster.main import app
from event_roster.models import events, roster  # noqa: F401


@pytest.fixture
def engine(tmp_path):
    """A file-backed SQLite database per test, so worker threads get their own connections."""
    engine = make_engine(f"sqlite:///{tmp_path / 'roster.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Session:
    db: Session = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def fake_redis():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def redis_client(fake_redis, monkeypatch: pytest.MonkeyPatch):
    """Route the per-event locks to fakeredis."""
    monkeypatch.setattr("event_roster.core.locks.get_redis_client", lambda: fake_redis)
    return fake_redis


@pytest.fixture
def client(session_factory, redis_client):
    # Override the database dependency
    def override_get_db():
        db: Session = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
