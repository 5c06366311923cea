from .base import Base
from .core import User
from .role import Role
from .user_role import users_roles

__all__ = [
    "Base",
    "User",
    "Role",
    "users_roles"
]
