"""Custom exception classes for the application."""

from fastapi import HTTPException, status


class TableConfigurationError(ValueError):
    """A pattern table or theme override could not be built.

    Raised while a table is constructed (defaults + alters) or while the
    overrides file is loaded, never while a label is classified.
    """

    def __init__(self, message: str, *, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class NotFoundError(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )
