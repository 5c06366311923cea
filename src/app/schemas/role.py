from typing import Literal

from pydantic import BaseModel

from .base import BaseSchema


class RoleAttributes(BaseSchema):
    """Attributes of a role resource."""
    name: str  # ROLE_USER, ROLE_ADMIN


class RoleCreate(RoleAttributes):
    """Schema for creating a role."""
    pass


class RoleCreateData(BaseModel):
    type: Literal["roles"]
    attributes: RoleCreate


class RoleCreateDocument(BaseModel):
    """Request document for POST /roles."""
    data: RoleCreateData
