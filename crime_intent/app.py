"""
Application context.

`CrimeIntentApp.initialize()` is called once at process start. It configures
logging, opens the store, brings the schema to the latest version and builds
the repository that every screen shares. View-models are created from the
context instead of reaching for a global.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from crime_intent.crime_repository import CrimeRepository
from crime_intent.db.database import create_session_factory, create_store_engine
from crime_intent.db.migrate import upgrade_database
from crime_intent.utils.settings import Settings, get_settings
from crime_intent.viewmodels import CrimeDetailViewModel, CrimeListViewModel

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> int:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level)
    logging.getLogger("crime_intent").setLevel(level)
    return level


class CrimeIntentApp:
    def __init__(self, settings: Settings, engine: Engine, session_factory: sessionmaker,
                 repository: CrimeRepository):
        self.settings = settings
        self.engine = engine
        self.session_factory = session_factory
        self.repository = repository

    @classmethod
    def initialize(cls, settings: Optional[Settings] = None) -> "CrimeIntentApp":
        settings = settings or get_settings()
        configure_logging(settings.log_level)
        engine = create_store_engine(settings.database_url)
        if settings.auto_migrate:
            upgrade_database(engine)
        session_factory = create_session_factory(engine)
        repository = CrimeRepository(session_factory)
        logger.info(
            "app_startup: database=%s log_level=%s",
            engine.url.render_as_string(hide_password=True),
            settings.log_level,
        )
        return cls(settings, engine, session_factory, repository)

    def crime_list_view_model(self) -> CrimeListViewModel:
        return CrimeListViewModel(self.repository)

    def crime_detail_view_model(self) -> CrimeDetailViewModel:
        return CrimeDetailViewModel(self.repository)

    def close(self) -> None:
        self.repository.close()
        self.engine.dispose()
