from unittest.mock import MagicMock, patch

import httplib2
import pytest
from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError

from apps.core.adapters.google_profile import GoogleProfileAdapter
from apps.core.adapters.orm_repositories import GoogleCredentialsRepository
from apps.core.domain.entities import GoogleProfile
from apps.core.domain.scopes import has_calendar_scope, normalize_scopes


def test_has_calendar_scope():
    assert has_calendar_scope('openid https://www.googleapis.com/auth/calendar')
    assert has_calendar_scope(['https://www.googleapis.com/auth/calendar'])
    assert not has_calendar_scope('https://www.googleapis.com/auth/calendar.readonly')
    assert not has_calendar_scope(None)
    assert normalize_scopes('a b') == ['a', 'b']


class TestGoogleProfileAdapter:
    def test_maps_userinfo(self):
        service = MagicMock()
        service.userinfo.return_value.get.return_value.execute.return_value = {
            'email': 'jane@example.com', 'name': 'Jane', 'picture': 'https://example.com/p.png',
        }
        with patch('apps.core.adapters.google_profile.build', return_value=service) as build:
            profile = GoogleProfileAdapter().get_profile(MagicMock())

        assert profile == GoogleProfile(email='jane@example.com', name='Jane', avatar_url='https://example.com/p.png')
        assert build.call_args[0][:2] == ('oauth2', 'v2')

    def test_http_error_returns_none(self):
        error = HttpError(httplib2.Response({'status': 401}), b'unauthorized')
        with patch('apps.core.adapters.google_profile.build', side_effect=error):
            assert GoogleProfileAdapter().get_profile(MagicMock()) is None

    def test_refresh_error_returns_none(self):
        with patch('apps.core.adapters.google_profile.build', side_effect=RefreshError('expired')):
            assert GoogleProfileAdapter().get_profile(MagicMock()) is None


@pytest.mark.django_db
class TestGoogleCredentialsRepository:
    def test_round_trip_to_google_credentials(self, user):
        repo = GoogleCredentialsRepository()
        creds = MagicMock(
            token='t', refresh_token='r', token_uri='https://oauth2.googleapis.com/token',
            client_id='cid', client_secret='sec', scopes=['a', 'b'],
        )

        repo.save(user.id, creds)
        rebuilt = repo.to_credentials(user.id)

        assert repo.exists_for_user(user.id)
        assert rebuilt.token == 't'
        assert rebuilt.refresh_token == 'r'
        assert rebuilt.scopes == ['a', 'b']

    def test_missing_credentials(self, user):
        assert GoogleCredentialsRepository().to_credentials(user.id) is None
