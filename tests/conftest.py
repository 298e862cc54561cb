import pytest

from crime_intent.crime_repository import CrimeRepository
from crime_intent.db.database import create_session_factory, create_store_engine, session_scope
from crime_intent.db.migrate import upgrade_database
from crime_intent.utils.settings import refresh_settings_cache

_ENV_VARS = ("CRIME_INTENT_DATABASE_URL", "CRIME_INTENT_AUTO_MIGRATE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Clear env + cached settings for each test to avoid cross-contamination."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


# Fresh in-memory store per test, migrated to head like a real startup
@pytest.fixture
def engine():
    eng = create_store_engine("sqlite+pysqlite:///:memory:")
    upgrade_database(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    with session_scope(session_factory) as session:
        yield session


@pytest.fixture
def repository(session_factory):
    repo = CrimeRepository(session_factory)
    try:
        yield repo
    finally:
        repo.close()
