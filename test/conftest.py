"""
Test Configuration and Fixtures

This module provides:
- A throwaway sqlite database shared by the app (aiosqlite) and the seeding helpers (sqlite3)
- Row cleanup after every integration test
- A TestClient with the ViaCEP client replaced by an in-memory fake

Architecture:
- Unit tests (marked `unit`): mocked repositories, no database
- Integration tests: the real app and repositories against sqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL has to exist first
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'drivent_test_{worker_id}_{os.getpid()}.db'
    os.environ['DRIVENT_TEST_DB_PATH'] = str(db_path)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Minimum bcrypt cost keeps sign-up/sign-in fast
    os.environ['BCRYPT_ROUNDS'] = '4'
    os.environ['SECRET_KEY'] = 'drivent_test_secret'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from drivent.main import app  # noqa: E402
from drivent.platform.config.di import container  # noqa: E402
from drivent.platform.database.models import Base  # noqa: E402
from test.shared.fakes import FakeCepClient  # noqa: E402


_DB_PATH = Path(os.environ['DRIVENT_TEST_DB_PATH'])


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
@pytest.fixture(scope='session')
def sync_engine() -> Generator[Engine, None, None]:
    """Plain sqlite3 engine on the app's database file, used to seed rows."""
    engine = create_engine(f'sqlite:///{_DB_PATH}')
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()
    _DB_PATH.unlink(missing_ok=True)


@pytest.fixture
def clean_database(sync_engine: Engine) -> Generator[None, None, None]:
    yield
    with sync_engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db_session(sync_engine: Engine) -> Generator[Session, None, None]:
    with Session(sync_engine, expire_on_commit=False) as session:
        yield session


# =============================================================================
# App Fixtures
# =============================================================================
@pytest.fixture
def fake_cep_client() -> FakeCepClient:
    return FakeCepClient()


@pytest.fixture
def client(fake_cep_client: FakeCepClient) -> Generator[TestClient, None, None]:
    container.via_cep_client.override(providers.Object(fake_cep_client))
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.via_cep_client.reset_override()
