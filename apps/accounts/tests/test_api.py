import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserRole
from apps.accounts.validators import is_valid_cpf, normalize_cpf
from apps.accounts.services.user_authentication import mask_cpf


# =============================================================================
# CPF Validation Tests
# =============================================================================

class TestCpfValidation:
    """Check-digit validation of CPF numbers."""

    @pytest.mark.parametrize('cpf', ['52998224725', '529.982.247-25', '111.444.777-35'])
    def test_valid_cpf(self, cpf):
        assert is_valid_cpf(cpf)

    @pytest.mark.parametrize('cpf', ['52998224724', '11111111111', '123', ''])
    def test_invalid_cpf(self, cpf):
        assert not is_valid_cpf(cpf)

    def test_normalize_strips_formatting(self):
        assert normalize_cpf('529.982.247-25') == '52998224725'


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user with a formatted CPF."""
        url = reverse('users:register')
        data = {
            'name': 'New User',
            'cpf': '111.444.777-35',
            'phone': '(11) 98765-4321',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['cpf'] == '11144477735'
        assert response.data['user']['role'] == UserRole.USER

        user = User.objects.get(cpf='11144477735')
        assert user.check_password('SecurePass123!')

    def test_register_duplicate_cpf(self, api_client, user):
        """Cannot register twice with the same CPF."""
        url = reverse('users:register')
        data = {
            'name': 'Duplicate',
            'cpf': user.cpf,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_register_invalid_cpf(self, api_client):
        """Check digits are verified."""
        url = reverse('users:register')
        data = {
            'name': 'Bad CPF',
            'cpf': '52998224724',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'cpf' in response.data

    def test_register_invalid_phone(self, api_client):
        url = reverse('users:register')
        data = {
            'name': 'Bad Phone',
            'cpf': '52998224725',
            'phone': '1133334444',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'phone' in response.data

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'name': 'Mismatch',
            'cpf': '52998224725',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'name': 'Weak',
            'cpf': '52998224725',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.filter(cpf='52998224725').exists()


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'cpf': '529.982.247-25', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['id'] == str(user.id)

        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'cpf': user.cpf, 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_failed_login_keeps_last_login(self, api_client, user):
        url = reverse('users:login')
        api_client.post(url, {'cpf': user.cpf, 'password': 'WrongPass123!'})

        user.refresh_from_db()
        assert user.last_login is None

    def test_login_unknown_cpf(self, api_client, db):
        url = reverse('users:login')
        response = api_client.post(url, {'cpf': '52998224725', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_account(self, api_client, user_inactive):
        url = reverse('users:login')
        response = api_client.post(url, {'cpf': user_inactive.cpf, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client, db):
        url = reverse('users:login')
        response = api_client.post(url, {'cpf': '52998224725'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data

    def test_cpf_masked_for_logs(self):
        assert mask_cpf('52998224725') == '*******4725'


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['cpf'] == user.cpf
        assert response.data['name'] == user.name

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_refresh(self, api_client, user):
        """Refresh token from login yields a new access token."""
        login = api_client.post(
            reverse('users:login'),
            {'cpf': user.cpf, 'password': 'TestPass123!'}
        )
        response = api_client.post(
            reverse('token_refresh'),
            {'refresh': login.data['tokens']['refresh']}
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


# =============================================================================
# User Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestUserAdministration:
    """Tests for /api/users/"""

    def test_list_users_as_admin(self, admin_client, user, other_user):
        response = admin_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_list_users_filtered_by_role(self, admin_client, user, other_user):
        response = admin_client.get(reverse('user-admin:user-list'), {'role': 'admin'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_list_users_forbidden_for_participant(self, authenticated_client):
        response = authenticated_client.get(reverse('user-admin:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_get_own_profile(self, authenticated_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(user.id)

    def test_get_other_profile_forbidden(self, authenticated_client, other_user):
        url = reverse('user-admin:user-detail', kwargs={'pk': other_user.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_own_name(self, authenticated_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = authenticated_client.patch(url, {'name': 'Renamed'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.name == 'Renamed'

    def test_participant_cannot_change_own_role(self, authenticated_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = authenticated_client.patch(url, {'role': 'admin'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        user.refresh_from_db()
        assert user.role == UserRole.USER

    def test_admin_promotes_user(self, admin_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {'role': 'admin'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.is_admin
        assert user.is_staff

    def test_admin_deletes_user(self, admin_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=user.id).exists()

    def test_admin_cannot_delete_self(self, admin_client, admin_user):
        url = reverse('user-admin:user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=admin_user.id).exists()

    def test_participant_cannot_delete(self, authenticated_client, user):
        url = reverse('user-admin:user-detail', kwargs={'pk': user.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
