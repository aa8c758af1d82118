from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, Tuple, TypeVar
from .core.errors import SyncError
from .models import Draft, Entity, Product
from .storage.collection import CollectionStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


@dataclass(frozen=True)
class CollectionState(Generic[E]):
    items: Tuple[E, ...] = ()
    loading: bool = False
    error: Optional[str] = None


class View(Protocol):
    def render(self, state: CollectionState) -> None: ...


class LoggerView:
    """Renders each state as log lines."""

    def __init__(self, logger_name: str = "mvc_sync.view"):
        self.log = logging.getLogger(logger_name)

    def render(self, state: CollectionState) -> None:
        if state.loading: self.log.info("Loading..."); return
        if state.error: self.log.info("Error: %s", state.error); return
        for item in state.items:
            self.log.info("%s", item.model_dump())


class CollectionController(Generic[E]):
    """
    Connects a CollectionStore to a view.

    This is where store failures are presented: the message is kept in the
    state and rendered, and the operation returns None.
    """

    def __init__(self, store: CollectionStore[E], view: View):
        self.store = store
        self.view = view
        self.loading = False
        self.error: Optional[str] = None

    @property
    def state(self) -> CollectionState[E]:
        return CollectionState(items=self.store.items, loading=self.loading, error=self.error)

    def render(self) -> None:
        self.view.render(self.state)

    async def load(self) -> None:
        self.loading = True; self.error = None
        self.render()
        try:
            await self.store.fetch_all()
        except SyncError as e:
            self.report_failure("fetch", e)
        finally:
            self.loading = False
        self.render()

    async def submit_create(self, draft: Draft) -> Optional[E]:
        try:
            created = await self.store.create(draft)
        except SyncError as e:
            self.report_failure("add", e); self.render()
            return None
        self.error = None
        self.render()
        return created

    async def submit_update(self, entity: E) -> Optional[E]:
        try:
            updated = await self.store.update(entity)
        except SyncError as e:
            self.report_failure("update", e); self.render()
            return None
        self.error = None
        self.render()
        return updated

    def report_failure(self, action: str, exc: SyncError) -> None:
        self.error = f"Failed to {action} {self.store.resource.name}"
        logger.warning("%s: %s", self.error, exc)


async def adjust_stock(controller: CollectionController[Product], product_id: int, delta: int) -> Optional[Product]:
    """Change a product's stock by delta, never below zero."""
    try:
        product = controller.store.get(product_id)
    except SyncError as e:
        controller.report_failure("update", e); controller.render()
        return None
    return await controller.submit_update(product.model_copy(update={"stock": max(0, product.stock + delta)}))
