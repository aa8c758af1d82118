from __future__ import annotations
import asyncio
from typing import Awaitable, Generic, Iterator, List, Optional, Tuple, TypeVar
from ..core.config import HTTP_TIMEOUT
from ..core.errors import NotFound, RemoteUnavailable, WrongKind
from ..models import Draft, Entity
from ..remote.base import RemoteSource

E = TypeVar("E", bound=Entity)
T = TypeVar("T")


class CollectionStore(Generic[E]):
    """
    The authoritative in-memory copy of one remote collection.

    Reads are synchronous and return snapshots. Mutations go to the remote
    first and are applied locally only after the remote call succeeded, so a
    failed operation never changes the collection. Mutations on one instance
    are serialized.
    """

    def __init__(self, remote: RemoteSource, *, timeout: Optional[float] = HTTP_TIMEOUT):
        self.remote = remote
        self.timeout = timeout
        self._items: List[E] = []
        self._lock = asyncio.Lock()

    @property
    def resource(self):
        return self.remote.resource

    @property
    def items(self) -> Tuple[E, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    def __contains__(self, entity_id: object) -> bool:
        return self._index_of(entity_id) is not None

    def get(self, entity_id: int) -> E:
        idx = self._index_of(entity_id)
        if idx is None: raise NotFound(entity_id)
        return self._items[idx]

    def _index_of(self, entity_id: object) -> Optional[int]:
        for i, item in enumerate(self._items):
            if item.id == entity_id: return i
        return None

    async def _call(self, op: str, aw: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(aw, self.timeout)
        except asyncio.TimeoutError as e:
            raise RemoteUnavailable(f"{op} {self.resource.name} timed out after {self.timeout}s") from e

    async def fetch_all(self) -> List[E]:
        async with self._lock:
            fetched = list(await self._call("fetch", self.remote.list()))
            ids = [e.id for e in fetched]
            if len(set(ids)) != len(ids):
                raise RemoteUnavailable(f"Remote {self.resource.name} payload has duplicate ids")
            self._items = fetched
            return list(fetched)

    async def create(self, draft: Draft) -> E:
        if not isinstance(draft, self.resource.draft): raise WrongKind(self.resource.draft, draft)
        async with self._lock:
            created = await self._call("create", self.remote.create(draft))
            if self._index_of(created.id) is not None:
                raise RemoteUnavailable(f"Remote assigned id {created.id!r} already held locally")
            self._items = [*self._items, created]
            return created

    async def update(self, entity: E) -> E:
        if not isinstance(entity, self.resource.entity): raise WrongKind(self.resource.entity, entity)
        async with self._lock:
            if self._index_of(entity.id) is None: raise NotFound(entity.id)
            updated = await self._call("update", self.remote.replace(entity))
            if updated.id != entity.id:
                raise RemoteUnavailable(f"Remote answered id {updated.id!r} for update of {entity.id!r}")
            idx = self._index_of(entity.id)
            items = list(self._items); items[idx] = updated
            self._items = items
            return updated
