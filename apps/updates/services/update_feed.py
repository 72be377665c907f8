"""
Release feed client.

Polls a GitHub-style releases API and turns the newest release into an
update notice for the running version. Every network or payload problem
degrades to "no update available"; callers never see an exception.

Example::

    service = UpdateService(current_version='1.0.0', repo='owner/project')
    info = service.check_for_updates()
    if info.update_available:
        print(info.manifest.download_url)
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from apps.updates.versioning import is_version_greater

from .exceptions import ReleaseFeedError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'https://api.github.com'
FEED_HEADERS = {'Accept': 'application/vnd.github+json'}


@dataclass
class UpdateManifest:
    version: str
    release_date: Optional[str]
    description: str
    download_url: Optional[str]
    checksum: str = ''
    required: bool = False
    breaking_changes: bool = False


@dataclass
class VersionInfo:
    current_version: str
    latest_version: str
    update_available: bool
    manifest: Optional[UpdateManifest] = None


def release_to_manifest(release: dict) -> UpdateManifest:
    """Build an UpdateManifest from one release record of the feed."""
    tag = release.get('tag_name') or ''
    assets = release.get('assets') or []
    if assets:
        download_url = assets[0].get('browser_download_url')
    else:
        download_url = release.get('html_url')

    return UpdateManifest(
        version=tag[1:] if tag.startswith('v') else tag,
        release_date=release.get('published_at'),
        description=release.get('body') or f"Release {tag}",
        download_url=download_url,
    )


class UpdateService:
    """
    Update checks for one repository.

    Args:
        current_version: Version of the running deployment
        repo: ``owner/name`` of the repository publishing releases
        session: requests session (a new one is created if omitted)
        api_url: Base URL of the releases API
        timeout: Per-request timeout in seconds
    """

    def __init__(self, current_version: str, repo: str, session: Optional[requests.Session] = None,
                 api_url: str = DEFAULT_API_URL, timeout: int = 10):
        self.current_version = current_version
        self.repo = repo
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None) -> 'UpdateService':
        return cls(
            current_version=settings.APP_VERSION,
            repo=settings.UPDATE_FEED_REPO,
            session=session,
            api_url=getattr(settings, 'UPDATE_FEED_API_URL', DEFAULT_API_URL),
            timeout=getattr(settings, 'UPDATE_FEED_TIMEOUT', 10),
        )

    @property
    def releases_url(self) -> str:
        return f"{self.api_url}/repos/{self.repo}/releases"

    def _get_json(self, url: str):
        try:
            response = self._session.get(url, headers=FEED_HEADERS, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            raise ReleaseFeedError(f"Release feed returned {e.response.status_code}") from e
        except (requests.RequestException, ValueError) as e:
            raise ReleaseFeedError(f"Release feed unreachable: {e}") from e

    def _list_releases(self) -> list:
        releases = self._get_json(self.releases_url)
        if not isinstance(releases, list):
            raise ReleaseFeedError("Release list is not a JSON array")
        return releases

    def fetch_latest_release(self) -> Optional[dict]:
        """
        Return the newest release record, or None.

        Repositories with only pre-releases have no ``latest`` release;
        on 404 the first entry of the full list is used instead.
        """
        try:
            response = self._session.get(
                f"{self.releases_url}/latest",
                headers=FEED_HEADERS,
                timeout=self.timeout,
            )
            if response.status_code == 404:
                releases = self._list_releases()
                return releases[0] if releases else None
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError, ReleaseFeedError) as e:
            logger.warning("Fetching latest release of %s failed: %s", self.repo, e)
            return None

    def check_for_updates(self) -> VersionInfo:
        """Compare the running version with the newest published release."""
        no_update = VersionInfo(
            current_version=self.current_version,
            latest_version=self.current_version,
            update_available=False,
        )

        release = self.fetch_latest_release()
        if not release:
            logger.info("No releases found for %s", self.repo)
            return no_update

        try:
            manifest = release_to_manifest(release)
        except (AttributeError, IndexError, TypeError) as e:
            logger.warning("Malformed release record from %s: %s", self.repo, e)
            return no_update

        update_available = is_version_greater(manifest.version, self.current_version)
        if update_available:
            logger.info("Update available: %s -> %s", self.current_version, manifest.version)

        return VersionInfo(
            current_version=self.current_version,
            latest_version=manifest.version,
            update_available=update_available,
            manifest=manifest if update_available else None,
        )

    def get_all_releases(self) -> list:
        """Every release record of the feed; empty on any error."""
        try:
            return self._list_releases()
        except ReleaseFeedError as e:
            logger.warning("Listing releases of %s failed: %s", self.repo, e)
            return []
