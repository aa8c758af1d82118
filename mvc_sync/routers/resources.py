from __future__ import annotations
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError
from ..core.errors import RemoteUnavailable
from ..remote.memory import InMemoryRemoteSource

router = APIRouter(tags=["resources"])

def get_remotes(request: Request) -> Dict[str, InMemoryRemoteSource]:
    return request.app.state.remotes

def _remote_for(resource: str, remotes: Dict[str, InMemoryRemoteSource]) -> InMemoryRemoteSource:
    remote = remotes.get(resource)
    if remote is None: raise HTTPException(status_code=404, detail=f"Unknown resource {resource}")
    return remote

def _unavailable(e: RemoteUnavailable) -> HTTPException:
    return HTTPException(status_code=e.status_code or 502, detail=e.message)

@router.get("/api/{resource}")
async def list_entities(resource: str, remotes: Dict[str, InMemoryRemoteSource] = Depends(get_remotes)) -> List[Dict[str, Any]]:
    remote = _remote_for(resource, remotes)
    try: return [e.model_dump(mode="json") for e in await remote.list()]
    except RemoteUnavailable as e: raise _unavailable(e)

@router.post("/api/{resource}", status_code=201)
async def create_entity(resource: str, payload: Dict[str, Any] = Body(...),
                        remotes: Dict[str, InMemoryRemoteSource] = Depends(get_remotes)) -> Dict[str, Any]:
    remote = _remote_for(resource, remotes)
    try: draft = remote.resource.parse_draft(payload)
    except ValidationError as e: raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    try: return (await remote.create(draft)).model_dump(mode="json")
    except RemoteUnavailable as e: raise _unavailable(e)

@router.put("/api/{resource}/{entity_id}")
async def replace_entity(resource: str, entity_id: int, payload: Dict[str, Any] = Body(...),
                         remotes: Dict[str, InMemoryRemoteSource] = Depends(get_remotes)) -> Dict[str, Any]:
    remote = _remote_for(resource, remotes)
    try: entity = remote.resource.parse_entity({"id": entity_id, **payload})
    except ValidationError as e: raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    if entity.id != entity_id:
        raise HTTPException(status_code=422, detail="Body id does not match path id")
    try: return (await remote.replace(entity)).model_dump(mode="json")
    except RemoteUnavailable as e: raise _unavailable(e)
