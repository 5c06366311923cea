from sqlalchemy import Column, String

from .base import Base


class Role(Base):
    """Named permission group attachable to users (ROLE_USER, ROLE_ADMIN)."""
    __tablename__ = "roles"

    name = Column(String, nullable=False)
