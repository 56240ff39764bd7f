import pytest
from django.urls import reverse
from rest_framework import status
from apps.numbers.models import RaffleNumber


# =============================================================================
# Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestNumberList:
    """Tests for GET /api/numeros/"""

    def test_participant_sees_only_own(self, participant_client, participant_numbers, other_numbers):
        response = participant_client.get(reverse('numbers:number-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
        assert {n['number'] for n in response.data['results']} == {'00011', '00022', '00033'}

    def test_participant_cannot_filter_other_user(
        self, participant_client, other_participant, participant_numbers, other_numbers
    ):
        response = participant_client.get(
            reverse('numbers:number-list'), {'user': str(other_participant.id)}
        )

        assert response.data['count'] == 3

    def test_admin_sees_all(self, admin_client, participant_numbers, other_numbers):
        response = admin_client.get(reverse('numbers:number-list'))

        assert response.data['count'] == 5

    def test_admin_filters_by_user(self, admin_client, other_participant, participant_numbers, other_numbers):
        response = admin_client.get(reverse('numbers:number-list'), {'user': str(other_participant.id)})

        assert response.data['count'] == 2

    def test_invalid_filter(self, admin_client):
        response = admin_client.get(reverse('numbers:number-list'), {'raffle': 'not-a-uuid'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestUserAndRaffleNumbers:
    """Tests for /api/numeros/user/{id}/ and /api/numeros/sorteio/{id}/"""

    def test_own_numbers(self, participant_client, participant, participant_numbers, other_numbers):
        url = reverse('numbers:user-numbers', kwargs={'user_id': participant.id})
        response = participant_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 3
        assert response.data[0]['raffle_name'] == 'Numbers Raffle'

    def test_other_users_numbers_forbidden(self, participant_client, other_participant, other_numbers):
        url = reverse('numbers:user-numbers', kwargs={'user_id': other_participant.id})
        response = participant_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_reads_user_numbers(self, admin_client, other_participant, other_numbers):
        url = reverse('numbers:user-numbers', kwargs={'user_id': other_participant.id})
        response = admin_client.get(url)

        assert len(response.data) == 2

    def test_raffle_numbers_admin_only(self, participant_client, admin_client, raffle, participant_numbers, other_numbers):
        url = reverse('numbers:raffle-numbers', kwargs={'raffle_id': raffle.id})

        assert participant_client.get(url).status_code == status.HTTP_403_FORBIDDEN

        response = admin_client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 5


# =============================================================================
# Generation Tests
# =============================================================================

@pytest.mark.django_db
class TestGenerateNumbers:
    """Tests for POST /api/numeros/gerar/"""

    def test_generate_numbers(self, admin_client, raffle, participant):
        data = {'user_id': str(participant.id), 'raffle_id': str(raffle.id), 'amount': '250.00'}
        response = admin_client.post(reverse('numbers:generate'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['count'] == 20
        assert len({n['number'] for n in response.data['numbers']}) == 20
        assert RaffleNumber.objects.filter(user=participant, raffle=raffle).count() == 20

    def test_insufficient_numbers_reports_details(self, admin_client, small_raffle, participant):
        data = {'user_id': str(participant.id), 'raffle_id': str(small_raffle.id), 'amount': '300.00'}
        response = admin_client.post(reverse('numbers:generate'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['details'] == {'remaining': 25, 'requested': 30}
        assert not RaffleNumber.objects.exists()

    def test_unknown_raffle(self, admin_client, participant):
        data = {
            'user_id': str(participant.id),
            'raffle_id': '00000000-0000-0000-0000-000000000000',
            'amount': '100.00',
        }
        response = admin_client.post(reverse('numbers:generate'), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_invalid_coupon(self, admin_client, raffle, participant):
        data = {
            'user_id': str(participant.id),
            'raffle_id': str(raffle.id),
            'amount': '100.00',
            'coupon_code': 'NOPE',
        }
        response = admin_client.post(reverse('numbers:generate'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_participant_cannot_generate(self, participant_client, raffle, participant):
        data = {'user_id': str(participant.id), 'raffle_id': str(raffle.id), 'amount': '250.00'}
        response = participant_client.post(reverse('numbers:generate'), data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not RaffleNumber.objects.exists()
