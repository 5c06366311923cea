from typing import Literal, Optional

from pydantic import BaseModel, EmailStr

from .base import BaseSchema, RelationshipInput


class UserAttributes(BaseSchema):
    """Attributes of a user resource."""
    username: str
    email: str


# request
# Properties to receive on object creation
class UserCreate(BaseSchema):
    """Schema for creating a user."""
    username: str
    email: EmailStr


class UserCreateRelationships(BaseModel):
    roles: Optional[RelationshipInput] = None


class UserCreateData(BaseModel):
    type: Literal["users"]
    attributes: UserCreate
    relationships: Optional[UserCreateRelationships] = None


class UserCreateDocument(BaseModel):
    """Request document for POST /users."""
    data: UserCreateData
