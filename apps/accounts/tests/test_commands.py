import pytest
from io import StringIO
from django.core.management import call_command

from apps.accounts.models import User, UserRole
from apps.configuration.models import SystemConfig
from apps.raffles.models import Raffle


@pytest.mark.django_db
class TestSeedDefaults:
    """Tests for the seed_defaults management command."""

    @pytest.fixture(autouse=True)
    def _admin_settings(self, settings):
        settings.ADMIN_CPF = '123.000.000-00'
        settings.ADMIN_PASSWORD = 'Bootstrap123!'
        settings.ADMIN_NAME = 'Root'

    def test_creates_admin_and_config(self):
        call_command('seed_defaults', stdout=StringIO())

        admin = User.objects.get(cpf='12300000000')
        assert admin.role == UserRole.ADMIN
        assert admin.is_staff
        assert admin.check_password('Bootstrap123!')
        assert SystemConfig.objects.get(key='block_value').value == 100
        assert SystemConfig.objects.get(key='numbers_per_block').value == 10
        assert not Raffle.objects.exists()

    def test_is_idempotent(self):
        call_command('seed_defaults', stdout=StringIO())
        SystemConfig.objects.filter(key='block_value').update(value=50)

        call_command('seed_defaults', stdout=StringIO())

        assert User.objects.filter(cpf='12300000000').count() == 1
        assert SystemConfig.objects.get(key='block_value').value == 50

    def test_sample_raffle(self):
        call_command('seed_defaults', '--sample-raffle', stdout=StringIO())

        raffle = Raffle.objects.get()
        assert raffle.is_open
        assert raffle.prizes.count() == 3
        assert raffle.total_winners() == 5
