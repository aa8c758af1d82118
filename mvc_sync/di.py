from __future__ import annotations
from typing import Callable, Generic, Optional, TypeVar
from .core.config import HTTP_TIMEOUT, REMOTE_BASE_URL, REMOTE_RESOURCE
from .models import get_resource
from .remote.http import HttpRemoteSource
from .storage.collection import CollectionStore

S = TypeVar("S")


async def close_remote(instance) -> None:
    remote = getattr(instance, "remote", None)
    if remote is not None and hasattr(remote, "aclose"):
        await remote.aclose()


class SingletonAccessor(Generic[S]):
    """Process-wide slot holding at most one instance, built on first use."""

    def __init__(self, factory: Callable[[], S]):
        self._factory = factory
        self._instance: Optional[S] = None

    def get_instance(self) -> S:
        if self._instance is None:
            self._instance = self._factory()
        return self._instance

    def reset(self) -> None:
        """Empty the slot without closing anything. Test setup only; see areset."""
        self._instance = None

    async def areset(self) -> None:
        """Empty the slot and close the dropped store's remote client."""
        instance, self._instance = self._instance, None
        await close_remote(instance)


class Scope(Generic[S]):
    """One open scope. Pass this object to every consumer in the scope."""

    def __init__(self, instance: S):
        self._instance: Optional[S] = instance

    @property
    def closed(self) -> bool:
        return self._instance is None

    def get_instance(self) -> S:
        if self._instance is None:
            raise RuntimeError("Scope is closed")
        return self._instance

    def close(self) -> None:
        self._instance = None

    def __enter__(self) -> "Scope[S]":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    async def __aenter__(self) -> "Scope[S]":
        return self

    async def __aexit__(self, *exc) -> None:
        instance, self._instance = self._instance, None
        await close_remote(instance)


class ScopedAccessor(Generic[S]):
    """Builds one instance per opened scope; scopes are independent of each other."""

    def __init__(self, factory: Callable[[], S]):
        self._factory = factory

    def scope(self) -> Scope[S]:
        return Scope(self._factory())


def build_default_store() -> CollectionStore:
    remote = HttpRemoteSource(REMOTE_BASE_URL, get_resource(REMOTE_RESOURCE), timeout=HTTP_TIMEOUT)
    return CollectionStore(remote, timeout=HTTP_TIMEOUT)


# Global store holder for callers that do not open a scope
default_store = SingletonAccessor(build_default_store)

def get_store() -> CollectionStore:
    return default_store.get_instance()

def reset_store() -> None:
    default_store.reset()

async def areset_store() -> None:
    await default_store.areset()
