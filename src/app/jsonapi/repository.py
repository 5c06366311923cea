"""Relationship repository contract.

A relationship repository reads and writes one named relationship field of a
resource, e.g. the `roles` field of `users`. Endpoints resolve the linkage in
a request to target ids and hand them to the repository; the repository owns
the lookup and persistence of the related entities.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Generic, Iterable, Optional, Type, TypeVar

from src.app.jsonapi.query_spec import QuerySpec
from src.app.jsonapi.resource_list import ResourceList

SourceT = TypeVar("SourceT")
SourceIdT = TypeVar("SourceIdT")
TargetT = TypeVar("TargetT")
TargetIdT = TypeVar("TargetIdT")


class RelationshipArity(str, Enum):
    TO_ONE = "to_one"
    TO_MANY = "to_many"


class RelationshipRepository(ABC, Generic[SourceT, SourceIdT, TargetT, TargetIdT]):
    """Read/write access to one relationship field of a source resource."""

    source_resource_class: ClassVar[type]
    target_resource_class: ClassVar[type]
    field_name: ClassVar[str]
    arity: ClassVar[RelationshipArity]

    @abstractmethod
    async def set_relation(self, source_id: SourceIdT, target_id: Optional[TargetIdT], field_name: str) -> None:
        """Replace a to-one relationship."""

    @abstractmethod
    async def set_relations(self, source_id: SourceIdT, target_ids: Iterable[TargetIdT], field_name: str) -> None:
        """Replace the whole to-many relationship with `target_ids`."""

    @abstractmethod
    async def add_relations(self, source_id: SourceIdT, target_ids: Iterable[TargetIdT], field_name: str) -> None:
        """Add `target_ids` to a to-many relationship."""

    @abstractmethod
    async def remove_relations(self, source_id: SourceIdT, target_ids: Iterable[TargetIdT], field_name: str) -> None:
        """Remove `target_ids` from a to-many relationship."""

    @abstractmethod
    async def find_one_target(self, source_id: SourceIdT, field_name: str, query_spec: QuerySpec) -> Optional[TargetT]:
        """Return the target of a to-one relationship."""

    @abstractmethod
    async def find_many_targets(
        self, source_id: SourceIdT, field_name: str, query_spec: QuerySpec
    ) -> ResourceList[TargetT]:
        """Return the targets of a to-many relationship with `query_spec` applied."""

    @classmethod
    def get_source_resource_class(cls) -> Type[SourceT]:
        return cls.source_resource_class

    @classmethod
    def get_target_resource_class(cls) -> Type[TargetT]:
        return cls.target_resource_class


class ToManyRelationshipRepository(RelationshipRepository[SourceT, SourceIdT, TargetT, TargetIdT]):
    """Base for many-to-many and one-to-many fields.

    The to-one operations of the contract do not apply to these fields and are
    inert: `set_relation` changes nothing and `find_one_target` finds nothing.
    """

    arity = RelationshipArity.TO_MANY

    async def set_relation(self, source_id: SourceIdT, target_id: Optional[TargetIdT], field_name: str) -> None:
        return None

    async def find_one_target(self, source_id: SourceIdT, field_name: str, query_spec: QuerySpec) -> Optional[TargetT]:
        return None
