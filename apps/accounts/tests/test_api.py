import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.accounts.services import (
    authenticate_user,
    register_user,
    InvalidCredentialsError,
    InactiveAccountError,
    RegistrationClosedError,
)
from apps.updates.models import SiteSettings


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client, registration_data):
        """Successfully register a new user."""
        url = reverse('accounts:register')
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['is_admin'] is False
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_without_display_name(self, api_client, registration_data):
        """Register without display name (optional field)."""
        url = reverse('accounts:register')
        registration_data.pop('display_name')
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_duplicate_email(self, api_client, user, registration_data):
        """Cannot register with existing email."""
        url = reverse('accounts:register')
        registration_data['email'] = user.email
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_password_mismatch(self, api_client, registration_data):
        """Registration fails when passwords don't match."""
        url = reverse('accounts:register')
        registration_data['password_confirm'] = 'DifferentPass123!'
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client, registration_data):
        """Registration fails with weak password."""
        url = reverse('accounts:register')
        registration_data['password'] = registration_data['password_confirm'] = '123'
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_refused_when_disabled(self, api_client, registration_data):
        """Admins can close sign-ups from site settings."""
        settings_row = SiteSettings.load()
        settings_row.allow_registration = False
        settings_row.save()

        url = reverse('accounts:register')
        response = api_client.post(url, registration_data)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(email='newuser@example.com').exists()


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        """Successfully login with valid credentials."""
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_wrong_password(self, api_client, user):
        """Login fails with wrong password."""
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_email(self, api_client):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'nobody@example.com', 'password': 'x'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        """Inactive accounts are rejected."""
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user_inactive.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/ and PATCH /api/auth/user/update/"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('accounts:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email

    def test_admin_flag_exposed(self, admin_client):
        url = reverse('accounts:current-user')
        response = admin_client.get(url)

        assert response.data['is_admin'] is True

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('accounts:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_display_name(self, authenticated_client, user):
        url = reverse('accounts:update-profile')
        response = authenticated_client.patch(url, {'display_name': 'Budi'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.display_name == 'Budi'

    def test_email_is_read_only(self, authenticated_client, user):
        url = reverse('accounts:update-profile')
        authenticated_client.patch(url, {'email': 'changed@example.com'})

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'


# =============================================================================
# Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAccountServices:

    def test_register_user_hashes_password(self):
        created = register_user(email='svc@example.com', password='SecurePass123!')

        assert created.check_password('SecurePass123!')
        assert created.is_admin is False

    def test_register_user_closed(self):
        SiteSettings.objects.update_or_create(pk=1, defaults={'allow_registration': False})

        with pytest.raises(RegistrationClosedError):
            register_user(email='svc@example.com', password='SecurePass123!')

    def test_authenticate_sets_last_login(self, user):
        assert user.last_login is None

        authenticated = authenticate_user(email=user.email, password='TestPass123!')

        assert authenticated.last_login is not None

    def test_authenticate_invalid(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_authenticate_inactive(self, db):
        User.objects.create_user(email='off@example.com', password='TestPass123!', is_active=False)

        with pytest.raises(InactiveAccountError):
            authenticate_user(email='off@example.com', password='TestPass123!')
