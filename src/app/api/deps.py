"""Shared dependencies for the JSON:API endpoints."""
from typing import Annotated, Callable

from fastapi import Depends, Request

from src.app.core.config import settings
from src.app.db.session import SessionDep
from src.app.jsonapi.query_spec import QuerySpec
from src.app.models.core import User
from src.app.models.role import Role
from src.app.relationships.user_to_role import UserToRoleRelationshipRepository


def query_spec_for(resource_class: type) -> Callable[[Request], QuerySpec]:
    """Build a dependency parsing the request's query parameters for `resource_class`."""
    def query_spec_dependency(request: Request) -> QuerySpec:
        return QuerySpec.from_params(
            resource_class,
            request.query_params.multi_items(),
            default_limit=settings.DEFAULT_PAGE_LIMIT,
            max_limit=settings.MAX_PAGE_LIMIT,
        )

    return query_spec_dependency


def get_user_roles_repository(db: SessionDep) -> UserToRoleRelationshipRepository:
    return UserToRoleRelationshipRepository(db)


# Type aliases for dependencies
RoleQuerySpec = Annotated[QuerySpec, Depends(query_spec_for(Role))]
UserQuerySpec = Annotated[QuerySpec, Depends(query_spec_for(User))]
UserRolesRepository = Annotated[UserToRoleRelationshipRepository, Depends(get_user_roles_repository)]
