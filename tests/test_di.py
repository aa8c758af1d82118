"""
Tests for shared store access: the process-wide slot and explicit scopes.
"""

import pytest

from mvc_sync import di
from mvc_sync.di import ScopedAccessor, SingletonAccessor, areset_store, get_store, reset_store
from mvc_sync.models import USERS, UserDraft
from mvc_sync.remote.http import HttpRemoteSource
from mvc_sync.remote.memory import InMemoryRemoteSource
from mvc_sync.storage.collection import CollectionStore


def make_store() -> CollectionStore:
    return CollectionStore(InMemoryRemoteSource(USERS))


class TestSingletonAccessor:
    def test_lazy_construction(self):
        calls = []
        accessor = SingletonAccessor(lambda: calls.append(1) or make_store())

        assert calls == []
        accessor.get_instance()
        accessor.get_instance()
        assert calls == [1]

    def test_same_instance_every_call(self):
        accessor = SingletonAccessor(make_store)
        assert accessor.get_instance() is accessor.get_instance()

    @pytest.mark.asyncio
    async def test_mutation_visible_through_every_reference(self):
        accessor = SingletonAccessor(make_store)
        first, second = accessor.get_instance(), accessor.get_instance()

        await first.create(UserDraft(name="Ana", email="ana@example.com"))

        assert [u.name for u in second.items] == ["Ana"]

    def test_reset_builds_a_fresh_instance(self):
        accessor = SingletonAccessor(make_store)
        before = accessor.get_instance()

        accessor.reset()

        assert accessor.get_instance() is not before


class TestDefaultStore:
    def test_default_store_is_http_backed(self):
        store = get_store()

        assert isinstance(store.remote, HttpRemoteSource)
        assert store.remote.resource.name == "users"
        assert get_store() is store

    def test_reset_store(self):
        store = get_store()
        reset_store()
        assert get_store() is not store

    @pytest.mark.asyncio
    async def test_areset_store_closes_owned_client(self):
        client = get_store().remote._client

        await areset_store()

        assert client.is_closed
        assert get_store().remote._client is not client

    @pytest.mark.asyncio
    async def test_areset_on_empty_slot(self):
        accessor = SingletonAccessor(make_store)
        await accessor.areset()
        assert accessor.get_instance() is not None

    def test_slot_can_be_overridden_for_tests(self, monkeypatch):
        monkeypatch.setattr(di, "default_store", SingletonAccessor(make_store))
        assert isinstance(get_store().remote, InMemoryRemoteSource)


class TestScopedAccessor:
    def test_same_instance_within_scope(self):
        accessor = ScopedAccessor(make_store)

        with accessor.scope() as scope:
            assert scope.get_instance() is scope.get_instance()

    def test_scopes_are_independent(self):
        accessor = ScopedAccessor(make_store)

        with accessor.scope() as a, accessor.scope() as b:
            assert a.get_instance() is not b.get_instance()

    def test_closed_scope_releases_instance(self):
        accessor = ScopedAccessor(make_store)

        with accessor.scope() as scope:
            pass

        assert scope.closed
        with pytest.raises(RuntimeError):
            scope.get_instance()

    @pytest.mark.asyncio
    async def test_consumers_share_mutations(self):
        accessor = ScopedAccessor(make_store)

        async def writer(scope):
            await scope.get_instance().create(UserDraft(name="Bo", email="bo@example.com"))

        def reader(scope):
            return [u.name for u in scope.get_instance()]

        async with accessor.scope() as scope:
            await writer(scope)
            assert reader(scope) == ["Bo"]

        assert scope.closed

    @pytest.mark.asyncio
    async def test_async_exit_closes_owned_http_client(self):
        accessor = ScopedAccessor(lambda: CollectionStore(HttpRemoteSource("http://unused/api", USERS)))

        async with accessor.scope() as scope:
            client = scope.get_instance().remote._client

        assert client.is_closed
