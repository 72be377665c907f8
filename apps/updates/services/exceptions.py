"""
Domain exceptions for updates app services.
"""


class UpdatesServiceError(Exception):
    """Base exception for updates service errors."""
    pass


class ReleaseFeedError(UpdatesServiceError):
    """Raised when the release feed can't be read."""
    pass
