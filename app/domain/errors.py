"""Error hierarchy — every failure the stores can report.

Domain errors (400/404) are raised before or instead of any storage mutation.
BackendError (500) means storage rejected or failed the operation; on the
relational backend the in-flight transaction has been rolled back.
Messages are safe to return to callers; internal details go to the log only.
"""


class AssignmentMapError(Exception):
    """Base exception for all store errors."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(AssignmentMapError):
    """Missing or malformed input."""

    code = "VALIDATION_ERROR"
    http_status = 400


class NotFoundError(AssignmentMapError):
    """An update or delete referenced an unknown id."""

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class BackendError(AssignmentMapError):
    """I/O failure, transaction failure or constraint violation."""

    code = "BACKEND_ERROR"
    http_status = 500

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation
