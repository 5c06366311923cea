from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

AttributesT = TypeVar("AttributesT", bound=BaseModel)


class BaseSchema(BaseModel):
    """Base schema with common fields."""
    model_config = ConfigDict(from_attributes=True)


# JSON:API document primitives

class ResourceIdentifier(BaseSchema):
    """Resource identifier object: {"type": ..., "id": ...}."""
    type: str
    id: str


class Links(BaseSchema):
    """Links object; only the keys that are set are rendered."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    self_link: Optional[str] = Field(default=None, alias="self")
    related: Optional[str] = None


class Relationship(BaseSchema):
    """Relationship object of a resource."""
    links: Optional[Links] = None
    data: Optional[list[ResourceIdentifier]] = None


class Resource(BaseSchema, Generic[AttributesT]):
    """Resource object."""
    type: str
    id: str
    attributes: AttributesT
    relationships: Optional[dict[str, Relationship]] = None
    links: Optional[Links] = None


class ResourceDocument(BaseSchema, Generic[AttributesT]):
    """Top-level document holding one resource."""
    data: Resource[AttributesT]
    links: Optional[Links] = None


class ResourceCollectionDocument(BaseSchema, Generic[AttributesT]):
    """Top-level document holding a list of resources."""
    data: list[Resource[AttributesT]]
    links: Optional[Links] = None
    meta: dict[str, Any] = Field(default_factory=dict)


class RelationshipDocument(BaseSchema):
    """To-many relationship linkage, used both in requests and responses."""
    data: list[ResourceIdentifier]
    links: Optional[Links] = None
    meta: Optional[dict[str, Any]] = None


class RelationshipInput(BaseSchema):
    """Linkage supplied inside a resource's relationships member on create."""
    data: list[ResourceIdentifier]
