import pytest
import requests
from unittest.mock import call

from apps.updates.services import UpdateService, release_to_manifest
from apps.updates.services.update_feed import FEED_HEADERS

from .conftest import feed_response

LATEST_URL = 'https://api.github.com/repos/minggudevv/finance-manager-v3/releases/latest'
RELEASES_URL = 'https://api.github.com/repos/minggudevv/finance-manager-v3/releases'


def _service(session, current_version='1.0.0'):
    return UpdateService(current_version, 'minggudevv/finance-manager-v3', session=session)


class TestReleaseToManifest:

    def test_strips_v_and_uses_first_asset(self, release):
        manifest = release_to_manifest(release)

        assert manifest.version == '1.4.0'
        assert manifest.release_date == '2025-03-01T10:00:00Z'
        assert manifest.description == 'Laporan per kategori'
        assert manifest.download_url.endswith('finance-manager-1.4.0.zip')
        assert manifest.required is False
        assert manifest.breaking_changes is False

    def test_fallbacks(self, release):
        release.update(tag_name='2.0.0', body='', assets=[])

        manifest = release_to_manifest(release)

        assert manifest.version == '2.0.0'
        assert manifest.description == 'Release 2.0.0'
        assert manifest.download_url == release['html_url']


class TestFetchLatestRelease:

    def test_latest_release(self, session, release):
        session.get.return_value = feed_response(200, release)

        assert _service(session).fetch_latest_release() == release
        session.get.assert_called_once_with(LATEST_URL, headers=FEED_HEADERS, timeout=10)

    def test_falls_back_to_release_list_on_404(self, session, release):
        session.get.side_effect = [
            feed_response(404, {'message': 'Not Found'}),
            feed_response(200, [release, {'tag_name': 'v1.3.0'}]),
        ]

        assert _service(session).fetch_latest_release() == release
        assert session.get.call_args_list == [
            call(LATEST_URL, headers=FEED_HEADERS, timeout=10),
            call(RELEASES_URL, headers=FEED_HEADERS, timeout=10),
        ]

    def test_404_with_empty_list(self, session):
        session.get.side_effect = [feed_response(404), feed_response(200, [])]

        assert _service(session).fetch_latest_release() is None

    def test_server_error_returns_none(self, session):
        session.get.return_value = feed_response(500)

        assert _service(session).fetch_latest_release() is None
        assert session.get.call_count == 1

    def test_network_error_returns_none(self, session):
        session.get.side_effect = requests.ConnectionError('unreachable')

        assert _service(session).fetch_latest_release() is None


class TestCheckForUpdates:

    def test_update_available(self, session, release):
        session.get.return_value = feed_response(200, release)

        info = _service(session, '1.2.0').check_for_updates()

        assert info.current_version == '1.2.0'
        assert info.latest_version == '1.4.0'
        assert info.update_available is True
        assert info.manifest.version == '1.4.0'

    def test_up_to_date(self, session, release):
        session.get.return_value = feed_response(200, release)

        info = _service(session, '1.4.0').check_for_updates()

        assert info.update_available is False
        assert info.latest_version == '1.4.0'
        assert info.manifest is None

    def test_feed_down_degrades_to_no_update(self, session):
        session.get.side_effect = requests.Timeout()

        info = _service(session, '1.2.0').check_for_updates()

        assert info.current_version == '1.2.0'
        assert info.latest_version == '1.2.0'
        assert info.update_available is False

    def test_malformed_release_degrades(self, session):
        session.get.return_value = feed_response(200, ['not', 'a', 'record'])

        info = _service(session, '1.2.0').check_for_updates()

        assert info.update_available is False
        assert info.latest_version == '1.2.0'


class TestGetAllReleases:

    def test_lists_releases(self, session, release):
        session.get.return_value = feed_response(200, [release])

        assert _service(session).get_all_releases() == [release]

    def test_error_returns_empty_list(self, session):
        session.get.return_value = feed_response(403)

        assert _service(session).get_all_releases() == []

    def test_non_list_payload(self, session):
        session.get.return_value = feed_response(200, {'message': 'rate limited'})

        assert _service(session).get_all_releases() == []


def test_from_settings(settings, session):
    settings.APP_VERSION = '3.1.4'
    settings.UPDATE_FEED_REPO = 'acme/ledger'
    settings.UPDATE_FEED_API_URL = 'https://git.example/api/'
    settings.UPDATE_FEED_TIMEOUT = 4

    service = UpdateService.from_settings(settings, session=session)

    assert service.current_version == '3.1.4'
    assert service.releases_url == 'https://git.example/api/repos/acme/ledger/releases'
    assert service.timeout == 4
