"""Rendering of models into JSON:API documents."""
from typing import Iterable, Type

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.app.core.config import settings
from src.app.models.core import User
from src.app.models.role import Role
from src.app.schemas.base import (
    AttributesT,
    Links,
    Relationship,
    RelationshipDocument,
    Resource,
    ResourceCollectionDocument,
    ResourceDocument,
    ResourceIdentifier,
)
from src.app.schemas.role import RoleAttributes
from src.app.schemas.user import UserAttributes

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JsonApiResponse(JSONResponse):
    media_type = JSONAPI_MEDIA_TYPE


def render(document: BaseModel, status_code: int = 200) -> JsonApiResponse:
    return JsonApiResponse(
        content=document.model_dump(mode="json", by_alias=True, exclude_none=True),
        status_code=status_code,
    )


def resource_url(resource_type: str, resource_id: object) -> str:
    return f"{settings.API_V1_STR}/{resource_type}/{resource_id}"


def role_identifier(role: Role) -> ResourceIdentifier:
    return ResourceIdentifier(type="roles", id=str(role.id))


def role_resource(role: Role) -> Resource[RoleAttributes]:
    return Resource[RoleAttributes](
        type="roles",
        id=str(role.id),
        attributes=RoleAttributes.model_validate(role),
        links=Links(self_link=resource_url("roles", role.id)),
    )


def user_resource(user: User) -> Resource[UserAttributes]:
    url = resource_url("users", user.id)
    return Resource[UserAttributes](
        type="users",
        id=str(user.id),
        attributes=UserAttributes.model_validate(user),
        relationships={
            "roles": Relationship(
                links=Links(self_link=f"{url}/relationships/roles", related=f"{url}/roles")
            )
        },
        links=Links(self_link=url),
    )


def collection_document(
    attributes_type: Type[AttributesT], resources: Iterable[Resource[AttributesT]], *, self_link: str, meta: dict
) -> ResourceCollectionDocument[AttributesT]:
    return ResourceCollectionDocument[attributes_type](
        data=list(resources), links=Links(self_link=self_link), meta=meta
    )


def resource_document(attributes_type: Type[AttributesT], resource: Resource[AttributesT]) -> ResourceDocument[AttributesT]:
    return ResourceDocument[attributes_type](data=resource, links=resource.links)


def relationship_document(roles: Iterable[Role], *, source_url: str, meta: dict) -> RelationshipDocument:
    return RelationshipDocument(
        data=[role_identifier(role) for role in roles],
        links=Links(self_link=f"{source_url}/relationships/roles", related=f"{source_url}/roles"),
        meta=meta,
    )
