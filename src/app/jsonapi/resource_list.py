from typing import Any, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class ResourceList(list, Generic[T]):
    """A page of resources plus the document-level meta."""

    def __init__(self, resources: Iterable[T] = (), *, meta: Optional[dict[str, Any]] = None):
        super().__init__(resources)
        self.meta = meta or {}
