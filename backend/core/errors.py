"""Error types raised while relaying a fitness image request.

Each error carries the HTTP status it maps to, so the request boundary can
turn any of them into a single JSON error envelope.
"""
from typing import Optional, Any


class FitnessImageError(Exception):
    """Base class for failures that map to a JSON error response."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code


class UploadValidationError(FitnessImageError):
    """Missing fields, disallowed file type, or oversize upload."""

    status_code = 400


class ProviderError(FitnessImageError):
    """The image provider returned an error or an unusable response."""

    status_code = 500


class NoImageGeneratedError(ProviderError):
    def __init__(self, details: Optional[Any] = None):
        super().__init__("No image was generated", details=details)


class ProviderTimeoutError(FitnessImageError):
    status_code = 504

    def __init__(self):
        super().__init__("Request timed out. Please try again.")
