from __future__ import annotations
from typing import List, Protocol
from ..models import Draft, Entity, Resource


class RemoteSource(Protocol):
    """The service of record for one collection."""
    resource: Resource

    async def list(self) -> List[Entity]: ...

    async def create(self, draft: Draft) -> Entity: ...

    async def replace(self, entity: Entity) -> Entity: ...
