"""Shared fixtures: SQLite databases, a threaded runner and an API client."""
import threading

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool, StaticPool

from medfinder.api.deps import get_db
from medfinder.core.rate_limiter import rate_limiter
from medfinder.db.init_db import init_db
from medfinder.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path):
    """File-backed database, so each thread's Session gets its own connection."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'medfinder.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
        poolclass=NullPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def run_concurrently(file_engine):
    """Run each `call(session)` in its own thread with its own Session, all released together."""
    def run(calls):
        barrier = threading.Barrier(len(calls))
        results = [None] * len(calls)
        errors = []

        def worker(index, call):
            session = Session(file_engine)
            try:
                barrier.wait()
                results[index] = call(session)
            except Exception as e:
                errors.append(e)
            finally:
                session.close()

        threads = [threading.Thread(target=worker, args=(i, call)) for i, call in enumerate(calls)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)
        assert not errors, errors
        return results

    return run


@pytest.fixture
def db(engine):
    session = Session(engine)
    yield session
    session.close()


@pytest.fixture
def client(engine):
    def override_get_db():
        session = Session(engine)
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    rate_limiter.clients.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
