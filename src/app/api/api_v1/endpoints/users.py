import logging
from uuid import UUID

from fastapi import APIRouter, Response, status

from src.app.api.api_v1.endpoints.user_roles import role_ids_from
from src.app.api.deps import UserQuerySpec, UserRolesRepository
from src.app.core.config import settings
from src.app.core.exceptions import ResourceNotFoundError
from src.app.crud.crud_user import user as user_crud
from src.app.db.session import SessionDep
from src.app.jsonapi.documents import (
    JsonApiResponse,
    collection_document,
    render,
    resource_document,
    user_resource,
)
from src.app.schemas.user import UserAttributes, UserCreateDocument

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_class=JsonApiResponse)
async def read_users(db: SessionDep, query_spec: UserQuerySpec) -> JsonApiResponse:
    """List users."""
    users = query_spec.apply(await user_crud.get_multi(db, limit=None))
    return render(
        collection_document(
            UserAttributes,
            (user_resource(user) for user in users),
            self_link=f"{settings.API_V1_STR}/users",
            meta=users.meta,
        )
    )


@router.get("/{user_id}", response_class=JsonApiResponse)
async def read_user(user_id: UUID, db: SessionDep) -> JsonApiResponse:
    """Get a specific user."""
    user = await user_crud.get_or_raise(db, id=user_id)
    return render(resource_document(UserAttributes, user_resource(user)))


@router.post("", response_class=JsonApiResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    document: UserCreateDocument,
    db: SessionDep,
    user_roles: UserRolesRepository,
) -> JsonApiResponse:
    """Create new user, attaching the roles given in relationships.roles."""
    relationships = document.data.relationships
    role_ids = role_ids_from(relationships.roles) if relationships and relationships.roles else None

    user = await user_crud.create(db, obj_in=document.data.attributes)
    logger.info(f"Created user {user.id} ({user.username})")
    if role_ids is not None:
        await user_roles.set_relations(user.id, role_ids, "roles")

    resource = user_resource(user)
    response = render(resource_document(UserAttributes, resource), status_code=status.HTTP_201_CREATED)
    response.headers["Location"] = resource.links.self_link
    return response


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, db: SessionDep) -> Response:
    """Delete user. Its roles are left in place."""
    user = await user_crud.remove(db, id=user_id)
    if not user:
        raise ResourceNotFoundError("users", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
