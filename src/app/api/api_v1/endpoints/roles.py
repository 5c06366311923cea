from uuid import UUID

from fastapi import APIRouter, status

from src.app.api.deps import RoleQuerySpec
from src.app.core.config import settings
from src.app.crud.crud_role import role as role_crud
from src.app.db.session import SessionDep
from src.app.jsonapi.documents import (
    JsonApiResponse,
    collection_document,
    render,
    resource_document,
    role_resource,
)
from src.app.schemas.role import RoleAttributes, RoleCreateDocument

router = APIRouter()


@router.get("", response_class=JsonApiResponse)
async def read_roles(db: SessionDep, query_spec: RoleQuerySpec) -> JsonApiResponse:
    """List roles."""
    roles = query_spec.apply(await role_crud.get_multi(db, limit=None))
    return render(
        collection_document(
            RoleAttributes,
            (role_resource(role) for role in roles),
            self_link=f"{settings.API_V1_STR}/roles",
            meta=roles.meta,
        )
    )


@router.get("/{role_id}", response_class=JsonApiResponse)
async def read_role(role_id: UUID, db: SessionDep) -> JsonApiResponse:
    """Get a specific role."""
    role = await role_crud.get_or_raise(db, id=role_id)
    return render(resource_document(RoleAttributes, role_resource(role)))


@router.post("", response_class=JsonApiResponse, status_code=status.HTTP_201_CREATED)
async def create_role(document: RoleCreateDocument, db: SessionDep) -> JsonApiResponse:
    """Create new role."""
    role = await role_crud.create(db, obj_in=document.data.attributes)
    resource = role_resource(role)
    response = render(resource_document(RoleAttributes, resource), status_code=status.HTTP_201_CREATED)
    response.headers["Location"] = resource.links.self_link
    return response
