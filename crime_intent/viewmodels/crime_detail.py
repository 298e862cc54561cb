"""
Detail view-model: binds to one crime id at a time.

States: unloaded -> load_crime(id) -> bound; save_crime may be called any
number of times while bound; load_crime rebinds and close() tears down.
"""
from __future__ import annotations

import asyncio
import uuid
from typing import Optional

from crime_intent.crime_repository import CrimeRepository
from crime_intent.db import schemas
from crime_intent.observable import LiveQuery, MutableLiveData, Subscription
from .base import ViewModel


class CrimeDetailViewModel(ViewModel):
    def __init__(self, repository: CrimeRepository):
        super().__init__()
        self._repository = repository
        self._crime_id: Optional[uuid.UUID] = None
        self._source: Optional[LiveQuery[Optional[schemas.Crime]]] = None
        self._source_subscription: Optional[Subscription] = None
        # Emits the bound crime, or None when no record has that id.
        self.crime: MutableLiveData[Optional[schemas.Crime]] = MutableLiveData()

    @property
    def crime_id(self) -> Optional[uuid.UUID]:
        return self._crime_id

    @property
    def is_loaded(self) -> bool:
        return self._crime_id is not None

    def load_crime(self, crime_id: uuid.UUID) -> None:
        self._unbind()
        self._crime_id = crime_id
        self._source = self._repository.observe_by_id(crime_id)
        self._source_subscription = self._source.subscribe(self.crime.set_value)

    def save_crime(self, crime: schemas.Crime) -> asyncio.Task:
        if self._crime_id is None:
            raise RuntimeError("No crime loaded; call load_crime() before save_crime()")
        return self._launch(self._repository.update(crime.model_copy(deep=True)), f"update crime {crime.id}")

    def _unbind(self) -> None:
        if self._source_subscription is not None:
            self._source_subscription.unsubscribe()
        self._source_subscription = None
        self._source = None

    def close(self) -> None:
        self._unbind()
        self._crime_id = None
        self.crime.clear_subscribers()
