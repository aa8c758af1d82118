from __future__ import annotations
import asyncio, logging
from typing import Dict, Iterable, List
from ..core.errors import RemoteUnavailable
from ..models import Draft, Entity, Resource

logger = logging.getLogger(__name__)


class InMemoryRemoteSource:
    """Simulated API for one resource. Assigns increasing ids starting at 1."""

    def __init__(self, resource: Resource, seed: Iterable[dict] = ()):
        self.resource = resource
        self._docs: Dict[int, Dict] = {}
        self._next_id = 1
        self._failures = 0
        self._lock = asyncio.Lock()
        for data in seed:
            entity = resource.promote(resource.parse_draft(data), self._next_id)
            self._docs[entity.id] = entity.model_dump(); self._next_id += 1

    def fail_next(self, count: int = 1) -> None:
        """Make the next `count` calls raise RemoteUnavailable."""
        self._failures = count

    def _check_failure(self, op: str) -> None:
        if self._failures > 0:
            self._failures -= 1
            logger.debug("Injected failure for %s %s", op, self.resource.name)
            raise RemoteUnavailable(f"{op} {self.resource.name} failed", status_code=503)

    async def list(self) -> List[Entity]:
        async with self._lock:
            self._check_failure("list")
            return [self.resource.parse_entity(d) for d in self._docs.values()]

    async def create(self, draft: Draft) -> Entity:
        async with self._lock:
            self._check_failure("create")
            entity = self.resource.promote(self.resource.parse_draft(draft.model_dump()), self._next_id)
            self._docs[entity.id] = entity.model_dump(); self._next_id += 1
            logger.debug("Created %s %s", self.resource.name, entity.id)
            return entity

    async def replace(self, entity: Entity) -> Entity:
        async with self._lock:
            self._check_failure("replace")
            if entity.id not in self._docs:
                raise RemoteUnavailable(f"{self.resource.name} {entity.id} not found", status_code=404)
            stored = self.resource.parse_entity(entity.model_dump())
            self._docs[stored.id] = stored.model_dump()
            logger.debug("Replaced %s %s", self.resource.name, stored.id)
            return stored
