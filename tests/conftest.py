import os

from docker.errors import DockerException
from testcontainers.postgres import PostgresContainer


def start_postgres_container():
    """
    Starts a throwaway PostgreSQL container for the test session.
    Returns None when Docker is not available; the suite then runs on an
    in-memory SQLite database.
    """
    try:
        container = PostgresContainer("postgres:latest")
        container.start()
    except DockerException as e:
        print(f"Docker unavailable, falling back to in-memory SQLite: {e}")
        return None
    return container


# The application builds its engine at import time from the cached settings,
# so DATABASE_URL has to point at the test database before `app` is imported.
# TEST_DATABASE_URL wins over the container when it is set.
postgres = None
if os.environ.get("TEST_DATABASE_URL"):
    os.environ["DATABASE_URL"] = os.environ["TEST_DATABASE_URL"]
else:
    postgres = start_postgres_container()
    os.environ["DATABASE_URL"] = postgres.get_connection_url() if postgres else "sqlite://"
os.environ["STORAGE_BACKEND"] = "sqlalchemy"

import pytest
from fastapi.testclient import TestClient

from app.crud.customer_crud import SqlAlchemyCustomerRepository, InMemoryCustomerRepository
from app.db.models import Base
from app.db.session import engine, SessionLocal
from app.main import app


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    if postgres is not None:
        postgres.stop()


@pytest.fixture(scope="session")
def postgres_container():
    if postgres is None:
        pytest.skip("No PostgreSQL container: Docker is unavailable or TEST_DATABASE_URL is set")
    return postgres


@pytest.fixture
def db_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(db_engine):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def sql_repository(db_session):
    return SqlAlchemyCustomerRepository(db_session)


@pytest.fixture
def memory_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def client(db_engine):
    with TestClient(app) as test_client:
        yield test_client
