"""
Updates app services layer.
"""

from .exceptions import (
    UpdatesServiceError,
    ReleaseFeedError,
)

from .update_feed import (
    UpdateManifest,
    VersionInfo,
    UpdateService,
    release_to_manifest,
)


__all__ = [
    # Exceptions
    'UpdatesServiceError',
    'ReleaseFeedError',

    # Release feed
    'UpdateManifest',
    'VersionInfo',
    'UpdateService',
    'release_to_manifest',
]
