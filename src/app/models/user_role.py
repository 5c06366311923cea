from sqlalchemy import Column, ForeignKey, Table, Uuid

from .base import Base


# Association table for the User-Role many-to-many relationship.
# No attributes of its own, so it is mapped as a plain Table and mutated
# through User.roles.
users_roles = Table(
    "users_roles",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)
