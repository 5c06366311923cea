from .base import (
    BaseSchema,
    Links,
    Relationship,
    RelationshipDocument,
    RelationshipInput,
    Resource,
    ResourceCollectionDocument,
    ResourceDocument,
    ResourceIdentifier,
)
from .role import RoleAttributes, RoleCreate, RoleCreateDocument
from .user import UserAttributes, UserCreate, UserCreateDocument
