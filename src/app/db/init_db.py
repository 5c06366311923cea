import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from yaml import safe_load

from src.app.core.config import settings
from src.app.crud.crud_role import role as role_crud
from src.app.crud.crud_user import user as user_crud
from src.app.db.session import AsyncSessionLocal, init_models
from src.app.models.role import Role
from src.app.schemas.role import RoleCreate
from src.app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def load_seed(path: Optional[Path] = None) -> dict[str, Any]:
    """Load the seed definition from YAML.

    Args:
        path: Seed file, defaults to settings.SEED_FILE

    Raises:
        FileNotFoundError: If the seed file does not exist
    """
    path = Path(path or settings.SEED_FILE)
    logger.info(f"Loading seed data from: {path}")
    with open(path, "r") as f:
        return safe_load(f) or {}


async def _create_roles(db: AsyncSession, role_names: list[str]) -> dict[str, Role]:
    """Create one role per name.

    Args:
        db: Database session
        role_names: Names of the roles to create

    Returns:
        dict[str, Role]: Created roles keyed by name
    """
    roles = {}
    for role_name in role_names:
        role = await role_crud.create(db, obj_in=RoleCreate(name=role_name))
        roles[role_name] = role
        logger.info(f"Created role: {role.name} with id: {role.id}")
    return roles


async def _create_users(db: AsyncSession, users: list[dict[str, Any]], roles: dict[str, Role]) -> None:
    """Create users and attach the roles they name.

    Args:
        db: Database session
        users: User entries with username, email and role names
        roles: Roles created by this seed run, keyed by name
    """
    for user_details in users:
        user = await user_crud.create(
            db, obj_in=UserCreate(username=user_details["username"], email=user_details["email"])
        )

        user_roles = set()
        for role_name in user_details.get("roles", []):
            if role_name not in roles:
                logger.warning(f"Unknown role '{role_name}' for user {user.username}, skipping role")
                continue
            user_roles.add(roles[role_name])

        user.roles = user_roles
        await user_crud.save(db, db_obj=user)
        logger.info(f"Created user: {user.username} with roles {sorted(r.name for r in user.roles)}")


async def seed_db(db: AsyncSession, seed: Optional[dict[str, Any]] = None) -> None:
    """Create the seed roles and users in `db`.

    No existence checks are made, running this twice creates every record twice.
    """
    seed = seed if seed is not None else load_seed()
    roles = await _create_roles(db, seed.get("roles", []))
    await _create_users(db, seed.get("users", []), roles)


async def init_db() -> None:
    """Create the schema and seed it."""
    await init_models()
    async with AsyncSessionLocal() as db:
        try:
            await seed_db(db)
            logger.info("Database initialization completed successfully")
        except Exception as e:
            logger.error(f"Database initialization failed: {str(e)}")
            await db.rollback()
            raise


def main() -> None:
    """Main function to run database initialization."""
    try:
        asyncio.run(init_db())
        print("✅ Database initialization completed successfully!")
    except Exception as e:
        print(f"❌ Database initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
