"""Endpoints for the `roles` relationship of `users`.

All reads and writes go through UserToRoleRelationshipRepository.
"""
from uuid import UUID

from fastapi import APIRouter, Response, status

from src.app.api.deps import RoleQuerySpec, UserRolesRepository
from src.app.core.exceptions import ConflictError
from src.app.jsonapi.documents import (
    JsonApiResponse,
    collection_document,
    relationship_document,
    render,
    resource_url,
    role_resource,
)
from src.app.schemas.base import RelationshipDocument, RelationshipInput
from src.app.schemas.role import RoleAttributes

router = APIRouter()

FIELD_NAME = "roles"


def role_ids_from(linkage: RelationshipDocument | RelationshipInput) -> list[str]:
    """Pull the role ids out of relationship linkage.

    Raises:
        ConflictError: If an identifier is not of type roles
    """
    role_ids = []
    for index, identifier in enumerate(linkage.data):
        if identifier.type != "roles":
            raise ConflictError(
                f"Expected resource identifiers of type roles, got {identifier.type}",
                source={"pointer": f"/data/{index}/type"},
            )
        role_ids.append(identifier.id)
    return role_ids


@router.get("/{user_id}/relationships/roles", response_class=JsonApiResponse)
async def read_user_role_linkage(
    user_id: UUID, user_roles: UserRolesRepository, query_spec: RoleQuerySpec
) -> JsonApiResponse:
    """Get the resource identifiers of the user's roles."""
    roles = await user_roles.find_many_targets(user_id, FIELD_NAME, query_spec)
    return render(relationship_document(roles, source_url=resource_url("users", user_id), meta=roles.meta))


@router.get("/{user_id}/roles", response_class=JsonApiResponse)
async def read_user_roles(
    user_id: UUID, user_roles: UserRolesRepository, query_spec: RoleQuerySpec
) -> JsonApiResponse:
    """Get the user's roles as full resources."""
    roles = await user_roles.find_many_targets(user_id, FIELD_NAME, query_spec)
    return render(
        collection_document(
            RoleAttributes,
            (role_resource(role) for role in roles),
            self_link=f"{resource_url('users', user_id)}/roles",
            meta=roles.meta,
        )
    )


@router.patch("/{user_id}/relationships/roles", status_code=status.HTTP_204_NO_CONTENT)
async def replace_user_roles(
    user_id: UUID, document: RelationshipDocument, user_roles: UserRolesRepository
) -> Response:
    """Replace all of the user's roles."""
    await user_roles.set_relations(user_id, role_ids_from(document), FIELD_NAME)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/relationships/roles", status_code=status.HTTP_204_NO_CONTENT)
async def add_user_roles(
    user_id: UUID, document: RelationshipDocument, user_roles: UserRolesRepository
) -> Response:
    """Add roles to the user."""
    await user_roles.add_relations(user_id, role_ids_from(document), FIELD_NAME)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}/relationships/roles", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user_roles(
    user_id: UUID, document: RelationshipDocument, user_roles: UserRolesRepository
) -> Response:
    """Remove roles from the user."""
    await user_roles.remove_relations(user_id, role_ids_from(document), FIELD_NAME)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
