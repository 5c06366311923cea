"""Domain exceptions rendered as JSON:API error documents."""
from typing import Any, Optional


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(self, detail: str, *, source: Optional[dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.source = source


class ResourceNotFoundError(ApiError):
    """A referenced resource id does not resolve."""
    status_code = 404
    title = "Not Found"

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with id {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class BadRequestError(ApiError):
    status_code = 400
    title = "Bad Request"


class ConflictError(ApiError):
    status_code = 409
    title = "Conflict"


class ServiceUnavailableError(ApiError):
    status_code = 503
    title = "Service Unavailable"
