from __future__ import annotations

import asyncio
from typing import List

from crime_intent.crime_repository import CrimeRepository
from crime_intent.db import schemas
from crime_intent.observable import LiveQuery
from .base import ViewModel


class CrimeListViewModel(ViewModel):
    """Exposes every stored crime, in creation order, to the list screen."""

    def __init__(self, repository: CrimeRepository):
        super().__init__()
        self._repository = repository
        self.crime_list: LiveQuery[List[schemas.Crime]] = repository.observe_all()

    @property
    def is_empty(self) -> bool:
        return not self.crime_list.value

    def add_crime(self, crime: schemas.Crime) -> asyncio.Task:
        return self._launch(self._repository.add(crime.model_copy(deep=True)), f"add crime {crime.id}")
