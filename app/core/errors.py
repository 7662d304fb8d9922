"""API error taxonomy.

Every failure a request can surface on purpose is one of these classes. Each
carries the human-readable message returned to the client and the HTTP status
code it maps to. Anything else escaping a handler is treated as an internal
error and answered with a generic 500.
"""


class ApiError(Exception):
    """Base class for classified request failures."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Error response body."""
        return {"message": self.message}


class ValidationError(ApiError):
    """Request payload or entity state failed a validation stage."""

    status_code = 400


class NotFoundError(ApiError):
    """Referenced entity does not exist."""

    status_code = 404
