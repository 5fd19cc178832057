"""Base exceptions for neo-assets.

All exceptions inherit from NeoAssetsError and carry an error code and a
details dictionary so they can be rendered into API error responses.
"""

from typing import Any, Dict, Optional


class NeoAssetsError(Exception):
    """Base exception for all neo-assets errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoAssetsError):
    """Raised when settings or wiring are invalid."""


def create_error_response(exception: NeoAssetsError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-assets exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
