import uuid
from unittest.mock import patch

import pytest

from crime_intent.db import schemas
from crime_intent.db.errors import StorageError
from crime_intent.viewmodels import CrimeDetailViewModel, CrimeListViewModel


class TestCrimeListViewModel:
    @pytest.mark.asyncio
    async def test_add_crime_updates_list(self, repository):
        vm = CrimeListViewModel(repository)
        seen = []
        vm.crime_list.subscribe(seen.append)
        assert vm.is_empty is True

        crime = schemas.Crime()
        task = vm.add_crime(crime)
        assert vm.pending_count == 1
        await task

        assert vm.pending_count == 0
        assert vm.is_empty is False
        assert [c.id for c in seen[-1]] == [crime.id]

    @pytest.mark.asyncio
    async def test_wait_idle_drains_pending_writes(self, repository):
        vm = CrimeListViewModel(repository)
        crimes = [schemas.Crime(title=str(i)) for i in range(3)]
        for crime in crimes:
            vm.add_crime(crime)
        await vm.wait_idle()

        assert [c.title for c in vm.crime_list.value] == ["0", "1", "2"]

    @pytest.mark.asyncio
    async def test_many_queued_adds_while_list_is_observed(self, repository):
        vm = CrimeListViewModel(repository)
        seen = []
        vm.crime_list.subscribe(seen.append)

        crimes = [schemas.Crime(title=f"crime {i}") for i in range(50)]
        tasks = [vm.add_crime(crime) for crime in crimes]
        await vm.wait_idle()

        assert [task.exception() for task in tasks] == [None] * len(crimes)
        assert len(seen) == 1 + len(crimes)
        assert [c.id for c in seen[-1]] == [c.id for c in crimes]
        assert len(repository.get_crimes()) == len(crimes)

    @pytest.mark.asyncio
    async def test_failed_add_is_logged_and_kept_on_task(self, repository, caplog):
        from crime_intent.db.repositories import crimes as crime_store

        vm = CrimeListViewModel(repository)
        with patch.object(crime_store, "upsert_crime", side_effect=StorageError("read-only")):
            task = vm.add_crime(schemas.Crime())
            await vm.wait_idle()

        assert isinstance(task.exception(), StorageError)
        assert "failed" in caplog.text
        assert vm.is_empty is True


class TestCrimeDetailViewModel:
    @pytest.mark.asyncio
    async def test_load_and_save_roundtrip(self, repository):
        crime = schemas.Crime()
        await repository.add(crime)

        vm = CrimeDetailViewModel(repository)
        assert vm.is_loaded is False
        seen = []
        vm.crime.subscribe(seen.append)

        vm.load_crime(crime.id)
        assert vm.crime_id == crime.id
        assert seen == [crime]

        edited = seen[-1]
        edited.title = "Burglary"
        edited.suspect = "Colonel Mustard"
        await vm.save_crime(edited)

        assert seen[-1].title == "Burglary"
        assert repository.get_crime(crime.id).suspect == "Colonel Mustard"

    @pytest.mark.asyncio
    async def test_several_saves_while_bound(self, repository):
        crime = schemas.Crime()
        await repository.add(crime)
        vm = CrimeDetailViewModel(repository)
        vm.load_crime(crime.id)

        for title in ("B", "Bu", "Bur"):
            crime.title = title
            vm.save_crime(crime)
        await vm.wait_idle()

        assert vm.crime.value.title == "Bur"

    def test_save_while_unloaded_raises(self, repository):
        vm = CrimeDetailViewModel(repository)
        with pytest.raises(RuntimeError):
            vm.save_crime(schemas.Crime())

    @pytest.mark.asyncio
    async def test_rebind_switches_source(self, repository):
        first = schemas.Crime(title="first")
        second = schemas.Crime(title="second")
        await repository.add(first)
        await repository.add(second)

        vm = CrimeDetailViewModel(repository)
        seen = []
        vm.crime.subscribe(seen.append)
        vm.load_crime(first.id)
        vm.load_crime(second.id)
        assert [c.title for c in seen] == ["first", "second"]

        # Writes to the previous record no longer reach this view-model
        first.title = "first (edited)"
        await repository.update(first)
        assert [c.title for c in seen] == ["first", "second"]

    def test_load_unknown_id_emits_none(self, repository):
        vm = CrimeDetailViewModel(repository)
        seen = []
        vm.crime.subscribe(seen.append)
        vm.load_crime(uuid.uuid4())
        assert seen == [None]

    @pytest.mark.asyncio
    async def test_close_tears_down(self, repository):
        crime = schemas.Crime()
        await repository.add(crime)
        vm = CrimeDetailViewModel(repository)
        seen = []
        vm.crime.subscribe(seen.append)
        vm.load_crime(crime.id)

        vm.close()
        assert vm.is_loaded is False
        assert vm.crime.has_subscribers is False

        crime.title = "after close"
        await repository.update(crime)
        assert len(seen) == 1
        with pytest.raises(RuntimeError):
            vm.save_crime(crime)
