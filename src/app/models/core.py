from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import Base
from .user_role import users_roles


class User(Base):
    """User account holding a set of role references."""
    __tablename__ = "users"

    username = Column(String, nullable=False)
    email = Column(String, nullable=False)

    # Relationships
    roles = relationship(
        "Role",
        secondary=users_roles,
        collection_class=set,
        lazy="selectin",
    )
