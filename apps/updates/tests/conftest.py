import pytest
import requests
from unittest.mock import MagicMock


def feed_response(status_code=200, payload=None):
    """Fake requests.Response for the release feed."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        error = requests.HTTPError(f'{status_code} Error')
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def release():
    """A release record as returned by the feed."""
    return {
        'tag_name': 'v1.4.0',
        'name': 'Finance Manager 1.4.0',
        'body': 'Laporan per kategori',
        'html_url': 'https://github.com/minggudevv/finance-manager-v3/releases/tag/v1.4.0',
        'published_at': '2025-03-01T10:00:00Z',
        'prerelease': False,
        'assets': [
            {
                'name': 'finance-manager-1.4.0.zip',
                'browser_download_url': 'https://github.com/minggudevv/finance-manager-v3/releases/download/v1.4.0/finance-manager-1.4.0.zip',
            },
        ],
    }


@pytest.fixture
def session():
    return MagicMock()
