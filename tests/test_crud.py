from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.exceptions import ResourceNotFoundError
from src.app.crud.crud_role import role as role_crud
from src.app.crud.crud_user import user as user_crud
from src.app.db.session import get_db
from src.app.schemas.role import RoleCreate
from src.app.schemas.user import UserCreate


@pytest.mark.asyncio
async def test_create_allocates_id(db: AsyncSession):
    role = await role_crud.create(db, obj_in=RoleCreate(name="ROLE_USER"))
    assert role.id is not None
    assert role.created_at is not None
    assert await role_crud.count(db) == 1


@pytest.mark.asyncio
async def test_get_returns_none_for_unknown_or_malformed_id(db: AsyncSession):
    assert await role_crud.get(db, id=uuid4()) is None
    assert await role_crud.get(db, id="not-a-uuid") is None


@pytest.mark.asyncio
async def test_get_or_raise(db: AsyncSession):
    user = await user_crud.create(db, obj_in=UserCreate(username="john", email="john@test.com"))
    assert (await user_crud.get_or_raise(db, id=user.id)).username == "john"
    assert (await user_crud.get_or_raise(db, id=str(user.id))).id == user.id

    missing = uuid4()
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await user_crud.get_or_raise(db, id=missing)
    assert exc_info.value.resource_type == "users"
    assert exc_info.value.resource_id == missing


@pytest.mark.asyncio
async def test_get_many_drops_unresolved_and_collapses_duplicates(db: AsyncSession):
    admin = await role_crud.create(db, obj_in=RoleCreate(name="ROLE_ADMIN"))
    member = await role_crud.create(db, obj_in=RoleCreate(name="ROLE_USER"))

    found = await role_crud.get_many(db, ids=[admin.id, str(admin.id), uuid4(), "garbage", member.id])
    assert sorted(r.name for r in found) == ["ROLE_ADMIN", "ROLE_USER"]

    assert await role_crud.get_many(db, ids=[]) == []
    assert await role_crud.get_many(db, ids=["garbage"]) == []


@pytest.mark.asyncio
async def test_get_multi_pages(db: AsyncSession):
    for name in ("a", "b", "c"):
        await role_crud.create(db, obj_in=RoleCreate(name=name))
    everything = await role_crud.get_multi(db, limit=None)
    assert sorted(r.name for r in everything) == ["a", "b", "c"]
    assert await role_crud.get_multi(db, skip=1, limit=1) == everything[1:2]


@pytest.mark.asyncio
async def test_get_by_name_and_username(db: AsyncSession):
    await role_crud.create(db, obj_in=RoleCreate(name="ROLE_USER"))
    await user_crud.create(db, obj_in=UserCreate(username="tom", email="tom@test.com"))
    assert len(await role_crud.get_by_name(db, name="ROLE_USER")) == 1
    assert [u.email for u in await user_crud.get_by_username(db, username="tom")] == ["tom@test.com"]
    assert [u.username for u in await user_crud.get_by_email(db, email="tom@test.com")] == ["tom"]


@pytest.mark.asyncio
async def test_remove_user_keeps_roles(db: AsyncSession):
    role = await role_crud.create(db, obj_in=RoleCreate(name="ROLE_USER"))
    user = await user_crud.create(db, obj_in=UserCreate(username="tom", email="tom@test.com"))
    user.roles = {role}
    await user_crud.save(db, db_obj=user)

    assert await user_crud.remove(db, id=user.id) is not None
    assert await user_crud.get(db, id=user.id) is None
    assert await role_crud.get(db, id=role.id) is not None
    assert await user_crud.remove(db, id=user.id) is None


@pytest.mark.asyncio
async def test_get_db_yields_a_session_and_closes():
    sessions = get_db()
    session = await sessions.__anext__()
    assert isinstance(session, AsyncSession)
    with pytest.raises(StopAsyncIteration):
        await sessions.__anext__()
