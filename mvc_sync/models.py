from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Generic, List, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Entity(BaseModel):
    """A record held in a managed collection. The id is assigned by the remote source."""
    model_config = ConfigDict(frozen=True, from_attributes=True)
    id: int


class Draft(BaseModel):
    """An entity's attribute set before the remote source assigns an id."""
    model_config = ConfigDict(frozen=True, extra="forbid")


class UserDraft(Draft):
    name: str
    email: str
    role: str = "user"

class User(Entity):
    name: str
    email: str
    role: str = "user"


class TaskDraft(Draft):
    title: str
    completed: bool = False

class Task(Entity):
    title: str
    completed: bool = False


class ProductDraft(Draft):
    name: str
    price: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)

class Product(Entity):
    name: str
    price: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)


class BookDraft(Draft):
    title: str
    author: str
    available: bool = True

class Book(Entity):
    title: str
    author: str
    available: bool = True


E = TypeVar("E", bound=Entity)
D = TypeVar("D", bound=Draft)


@dataclass(frozen=True)
class Resource(Generic[E, D]):
    """Binds a collection name to its entity and draft models."""
    name: str
    entity: Type[E]
    draft: Type[D]

    def parse_entity(self, data) -> E:
        return self.entity.model_validate(data)

    def parse_draft(self, data) -> D:
        return self.draft.model_validate(data)

    def parse_collection(self, data) -> List[E]:
        return TypeAdapter(List[self.entity]).validate_python(data)

    def promote(self, draft: D, entity_id: int) -> E:
        return self.entity(id=entity_id, **draft.model_dump())


USERS = Resource("users", User, UserDraft)
TASKS = Resource("tasks", Task, TaskDraft)
PRODUCTS = Resource("products", Product, ProductDraft)
BOOKS = Resource("books", Book, BookDraft)

RESOURCES: Dict[str, Resource] = {r.name: r for r in (USERS, TASKS, PRODUCTS, BOOKS)}


def get_resource(name: str) -> Resource:
    try: return RESOURCES[name]
    except KeyError: raise KeyError(f"Unknown resource {name!r}") from None


SAMPLE_DATA: Dict[str, List[dict]] = {
    "users": [
        {"name": "Ana", "email": "ana@example.com", "role": "admin"},
        {"name": "Bo", "email": "bo@example.com"},
    ],
    "tasks": [
        {"title": "Write the report"},
        {"title": "Review pull requests", "completed": True},
    ],
    "products": [
        {"name": "Laptop", "price": 999.99, "stock": 50},
        {"name": "Smartphone", "price": 499.99, "stock": 100},
        {"name": "Headphones", "price": 99.99, "stock": 200},
    ],
    "books": [
        {"title": "Dune", "author": "Frank Herbert"},
        {"title": "Neuromancer", "author": "William Gibson", "available": False},
    ],
}
