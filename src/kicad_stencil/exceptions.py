"""Exception hierarchy for stencil generation.

Geometry and serialization never raise; these cover the edges of the
system: tool parameters, board loading, and writing output documents.
"""

from __future__ import annotations

from typing import Any


class StencilError(Exception):
    """Base exception for all stencil errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class ValidationError(StencilError):
    """Raised when a tool parameter is rejected."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any):
        super().__init__(message, "VALIDATION_ERROR", field=field, **kwargs)


class ResourceNotFoundError(StencilError):
    """Raised when a requested resource is not available."""

    error_code = "NOT_FOUND"

    def __init__(self, message: str, resource_type: str | None = None, **kwargs: Any):
        super().__init__(message, "NOT_FOUND", resource_type=resource_type, **kwargs)


class BoardLoadingError(StencilError):
    """Raised when board loading fails."""

    error_code = "BOARD_LOADING_ERROR"

    def __init__(self, message: str, board_path: str | None = None, **kwargs: Any):
        super().__init__(message, "BOARD_LOADING_ERROR", board_path=board_path, **kwargs)


class ExportError(StencilError):
    """Raised when a stencil document cannot be written."""

    error_code = "EXPORT_ERROR"

    def __init__(self, message: str, output_path: str | None = None, **kwargs: Any):
        super().__init__(message, "EXPORT_ERROR", output_path=output_path, **kwargs)


__all__ = [
    "StencilError",
    "ValidationError",
    "ResourceNotFoundError",
    "BoardLoadingError",
    "ExportError",
]
