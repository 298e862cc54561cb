"""
Crime repository: the single access point between the UI layer and the store.

Reads run on the caller's thread. Writes run on one background worker so the
UI loop never blocks on the database; once a write has committed, the live
queries handed out by `observe_all` and `observe_by_id` are refreshed on the
awaiting loop. Both `add` and `update` upsert, so updating an unknown id
inserts it. Last write wins.

Every session, read or write, is opened under one lock. An in-memory store
shares a single connection between threads, and closing a read session would
otherwise roll back a write in progress on the worker.
"""
from __future__ import annotations

import asyncio
import logging
import threading
import uuid
import weakref
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session, sessionmaker

from crime_intent.db import schemas
from crime_intent.db.database import session_scope
from crime_intent.db.repositories import crimes as crime_store
from crime_intent.observable import LiveQuery

logger = logging.getLogger(__name__)


class CrimeRepository:
    """Mediates reads and writes of crime records and exposes live queries."""

    def __init__(self, session_factory: sessionmaker, executor: Optional[ThreadPoolExecutor] = None):
        self._session_factory = session_factory
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="crime-store")
        self._queries: "weakref.WeakSet[LiveQuery]" = weakref.WeakSet()
        self._store_lock = threading.Lock()
        self._closed = False

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self._store_lock:
            with session_scope(self._session_factory) as db:
                yield db

    # Reads
    def get_crimes(self) -> List[schemas.Crime]:
        with self._session() as db:
            return [schemas.Crime.model_validate(row) for row in crime_store.get_crimes(db)]

    def get_crime(self, crime_id: uuid.UUID) -> Optional[schemas.Crime]:
        with self._session() as db:
            row = crime_store.get_crime(db, crime_id)
            return schemas.Crime.model_validate(row) if row is not None else None

    def observe_all(self) -> LiveQuery[List[schemas.Crime]]:
        query: LiveQuery[List[schemas.Crime]] = LiveQuery(self.get_crimes)
        self._queries.add(query)
        return query

    def observe_by_id(self, crime_id: uuid.UUID) -> LiveQuery[Optional[schemas.Crime]]:
        query: LiveQuery[Optional[schemas.Crime]] = LiveQuery(
            lambda: self.get_crime(crime_id), key=crime_id
        )
        self._queries.add(query)
        return query

    # Writes
    async def add(self, crime: schemas.Crime) -> schemas.Crime:
        return await self._write(crime, "add")

    async def update(self, crime: schemas.Crime) -> schemas.Crime:
        return await self._write(crime, "update")

    async def _write(self, crime: schemas.Crime, action: str) -> schemas.Crime:
        if self._closed:
            raise RuntimeError("CrimeRepository is closed")
        loop = asyncio.get_running_loop()
        # Copy so later UI edits cannot race the worker thread.
        pending = crime.model_copy(deep=True)
        stored = await loop.run_in_executor(self._executor, self._upsert, pending)
        logger.debug("%s crime %s completed", action, stored.id)
        self._notify(stored.id)
        return stored

    def _upsert(self, crime: schemas.Crime) -> schemas.Crime:
        with self._session() as db:
            row = crime_store.upsert_crime(db, crime)
            return schemas.Crime.model_validate(row)

    def _notify(self, crime_id: uuid.UUID) -> None:
        for query in list(self._queries):
            if query.key is not None and query.key != crime_id:
                continue
            if not query.has_subscribers:
                query.invalidate()
                continue
            try:
                query.refresh()
            except Exception:
                # The write has committed; a failed re-read must not fail it.
                logger.exception("Refreshing live query after write of crime %s failed", crime_id)
                query.invalidate()

    def close(self) -> None:
        """Stop the background writer; pending writes finish first."""
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)
