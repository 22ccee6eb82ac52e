"""Custom exceptions for Film Views with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    FILM_VIEWS_ERROR = "FILM_VIEWS_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Rendering errors
    MISSING_MOUNT = "MISSING_MOUNT"
    DUPLICATE_MOUNT = "DUPLICATE_MOUNT"
    RENDER_ERROR = "RENDER_ERROR"
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class FilmViewsException(Exception):
    """Base exception for film view errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FILM_VIEWS_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize film views exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class MountException(FilmViewsException):
    """Mount point errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.MISSING_MOUNT,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class MissingMountException(MountException):
    """Named mount point does not exist in the document."""

    def __init__(self, mount_id: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"Mount point '{mount_id}' not found",
            code=ErrorCode.MISSING_MOUNT,
            status_code=404,
            details={"mount_id": mount_id, **(details or {})},
        )
        self.mount_id = mount_id


class DuplicateMountException(MountException):
    """Two mount points in one document share an identifier."""

    def __init__(self, mount_id: str):
        super().__init__(
            f"Mount point '{mount_id}' is declared more than once",
            code=ErrorCode.DUPLICATE_MOUNT,
            status_code=500,
            details={"mount_id": mount_id},
        )
        self.mount_id = mount_id


class RenderException(FilmViewsException):
    """Formatting or appending a record failed mid-render."""

    def __init__(self, message: str = "Render failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.RENDER_ERROR,
            status_code=500,
            details=details,
        )


class ViewNotFoundException(FilmViewsException):
    """No view is registered under the requested name."""

    def __init__(self, view_name: str, details: dict[str, Any] | None = None):
        super().__init__(
            f"View '{view_name}' not found",
            code=ErrorCode.VIEW_NOT_FOUND,
            status_code=404,
            details={"view_name": view_name, **(details or {})},
        )
        self.view_name = view_name


class ConfigurationException(FilmViewsException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
