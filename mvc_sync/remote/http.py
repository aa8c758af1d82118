from __future__ import annotations
import logging
from typing import Any, List, Optional
import httpx
from pydantic import ValidationError
from ..core.config import HTTP_TIMEOUT
from ..core.errors import RemoteUnavailable
from ..models import Draft, Entity, Resource

logger = logging.getLogger(__name__)


class HttpRemoteSource:
    """
    REST remote for one resource:

        GET  {base_url}/{resource}        -> list of entities
        POST {base_url}/{resource}        -> created entity
        PUT  {base_url}/{resource}/{id}   -> replaced entity

    Every failure (transport, non-2xx status, malformed payload) is raised as
    RemoteUnavailable. A client passed in is borrowed and never closed here.
    """

    def __init__(self, base_url: str, resource: Resource, *, timeout: float = HTTP_TIMEOUT,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.resource = resource
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/{self.resource.name}"

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpRemoteSource":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, body: Optional[dict] = None) -> Any:
        logger.debug("%s %s", method, url)
        try:
            r = await self._client.request(method, url, json=body)
            r.raise_for_status()
            return r.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("%s %s returned %s", method, url, status)
            raise RemoteUnavailable(f"{method} {url} returned {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e.__class__.__name__)
            raise RemoteUnavailable(f"{method} {url} failed: {e.__class__.__name__}") from e
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise RemoteUnavailable(f"{method} {url} returned a non-JSON body") from e

    def _parse(self, parser, payload: Any, url: str):
        try: return parser(payload)
        except ValidationError as e:
            logger.warning("Unexpected %s payload from %s", self.resource.name, url)
            raise RemoteUnavailable(f"Unexpected {self.resource.name} payload from {url}") from e

    async def list(self) -> List[Entity]:
        url = self.collection_url
        return self._parse(self.resource.parse_collection, await self._request("GET", url), url)

    async def create(self, draft: Draft) -> Entity:
        url = self.collection_url
        payload = await self._request("POST", url, draft.model_dump(mode="json"))
        return self._parse(self.resource.parse_entity, payload, url)

    async def replace(self, entity: Entity) -> Entity:
        url = f"{self.collection_url}/{entity.id}"
        payload = await self._request("PUT", url, entity.model_dump(mode="json"))
        return self._parse(self.resource.parse_entity, payload, url)
