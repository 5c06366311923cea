import logging
from typing import Iterable, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.crud.crud_role import CRUDRole, role as role_crud
from src.app.crud.crud_user import CRUDUser, user as user_crud
from src.app.jsonapi.query_spec import QuerySpec
from src.app.jsonapi.repository import ToManyRelationshipRepository
from src.app.jsonapi.resource_list import ResourceList
from src.app.models.core import User
from src.app.models.role import Role

logger = logging.getLogger(__name__)


class UserToRoleRelationshipRepository(ToManyRelationshipRepository[User, UUID, Role, UUID]):
    """The many-to-many `roles` relationship of `users`.

    Role ids are resolved in one batch lookup; ids that do not resolve are
    dropped without error. A user id that does not resolve raises
    ResourceNotFoundError on every mutation, while reads treat the user as
    having no roles.

    Each mutation is a read of the user followed by a save within the session's
    transaction. Two concurrent mutations of the same user's roles are not
    coordinated here: the database decides which write survives.
    """

    source_resource_class = User
    target_resource_class = Role
    field_name = "roles"

    def __init__(self, db: AsyncSession, users: CRUDUser = user_crud, roles: CRUDRole = role_crud):
        self.db = db
        self.users = users
        self.roles = roles

    async def _resolve_roles(self, user_id: UUID, role_ids: Iterable[UUID], field_name: str) -> tuple[User, List[Role]]:
        user = await self.users.get_or_raise(self.db, id=user_id)
        role_ids = list(role_ids)
        roles = await self.roles.get_many(self.db, ids=role_ids)
        logger.info(
            f"Resolved {len(roles)} of {len(role_ids)} role ids for {field_name} of user {user_id}"
        )
        return user, roles

    async def set_relations(self, user_id: UUID, role_ids: Iterable[UUID], field_name: str) -> None:
        """Make the user's roles exactly the roles in `role_ids`."""
        user, roles = await self._resolve_roles(user_id, role_ids, field_name)
        user.roles = set(roles)
        await self.users.save(self.db, db_obj=user)

    async def add_relations(self, user_id: UUID, role_ids: Iterable[UUID], field_name: str) -> None:
        """Add the roles in `role_ids` to the user's roles."""
        user, roles = await self._resolve_roles(user_id, role_ids, field_name)
        user.roles.update(roles)
        await self.users.save(self.db, db_obj=user)

    async def remove_relations(self, user_id: UUID, role_ids: Iterable[UUID], field_name: str) -> None:
        """Detach the roles in `role_ids` from the user. The roles themselves are kept."""
        user, roles = await self._resolve_roles(user_id, role_ids, field_name)
        user.roles.difference_update(roles)
        await self.users.save(self.db, db_obj=user)

    async def find_many_targets(self, user_id: UUID, field_name: str, query_spec: QuerySpec) -> ResourceList[Role]:
        user = await self.users.get(self.db, id=user_id)
        roles = user.roles if user is not None else set()
        return query_spec.apply(roles)
